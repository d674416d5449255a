"""Composición de la CLI (Typer).

Por qué un builder en vez de registro global:
- Cada comando es una función independiente; aquí se compone el árbol
  explícitamente, sin depender del orden de import.
- Los tests construyen su propia app con `build_app()`.
"""

from __future__ import annotations

import sys

import typer

from cli import doctor
from cli.ip import ip
from cli.logging_setup import configure_logging
from cli.now import now


def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Personal utilities: public ip and world clock."""

    configure_logging(verbose)


def build_app() -> typer.Typer:
    app = typer.Typer(
        no_args_is_help=True,
        context_settings={"help_option_names": ["-h", "--help"]},
    )
    app.callback()(_root)
    app.command(name="ip", help="shows ip and copies to the clipboard")(ip)
    app.command(name="now", help="shows time with different time zones")(now)
    app.add_typer(doctor.app, name="doctor")
    return app


def run() -> None:
    # UnicodeEncodeError en consolas Windows (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    build_app()()
