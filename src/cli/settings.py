"""Carga de `AppSettings` en el borde de la CLI."""

from __future__ import annotations

import typer
from pydantic import ValidationError

from core.config import AppSettings


def load_settings() -> AppSettings:
    """Como `AppSettings()`, pero un KC_* inválido se reporta como error de uso."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"KC_{'_'.join(str(p) for p in err['loc']).upper()}: {err['msg']}" for err in exc.errors()
        )
        raise typer.BadParameter(problems) from exc
