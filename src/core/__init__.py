"""Core: configuración, dominio, contratos y servicios (sin Typer)."""
