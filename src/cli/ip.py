"""Comando `ip`: muestra la IP pública y la copia al portapapeles."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.clipboard import SystemClipboard
from adapters.trace_source import HttpTraceSource
from cli.settings import load_settings
from core.services.ip_reporter import report_ip

_console = Console()


def ip() -> None:
    """Shows ip and copies to the clipboard."""

    settings = load_settings()
    outcome = report_ip(HttpTraceSource(settings), SystemClipboard(), _console)
    if outcome.is_failure:
        raise typer.Exit(code=1)
