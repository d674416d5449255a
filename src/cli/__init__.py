"""CLI (Typer): composición de comandos y presentación con Rich."""
