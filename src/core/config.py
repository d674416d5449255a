"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/reloj) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "kc-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "kc-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "kc-cli"
    return Path.home() / ".config" / "kc-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="KC_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    trace_url: str = Field(
        default="https://1.1.1.1/cdn-cgi/trace",
        min_length=8,
        description="Endpoint de trace (texto key=value) que devuelve la IP observada.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = default de httpx.",
    )
    user_agent: str = Field(
        default="kc-cli/0.1",
        min_length=1,
        description="User-Agent para la petición de trace.",
    )

    ist_zone_name: str = Field(
        default="Asia/Kolkata",
        min_length=1,
        description="Zona IANA usada para la vista IST.",
    )
    refresh_interval_seconds: float = Field(
        default=0.1,
        gt=0,
        le=60,
        description="Intervalo de refresco del modo continuo de `now`.",
    )
