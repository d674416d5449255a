"""Comando `now`: hora actual en IST, UTC y zona local (24h y 12h)."""

from __future__ import annotations

import signal
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console

from cli.settings import load_settings
from cli.ui_components import render_snapshot
from core.services.cancellation import CancellationToken
from core.services.clock import load_zone, run_continuous, take_snapshot

_console = Console()


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Instala un handler de SIGINT que cancela `token`; restaura el anterior al salir."""

    def _handler(signum, frame) -> None:  # noqa: ARG001
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


def now(
    no_stop: bool = typer.Option(
        False,
        "--no-stop",
        help="Continuously print time until stopped.",
    ),
) -> None:
    """Shows time with different timezones with AM and PM."""

    settings = load_settings()
    ist_zone = load_zone(settings.ist_zone_name)

    def render() -> str:
        return render_snapshot(take_snapshot(ist_zone=ist_zone))

    if not no_stop:
        _console.print(render(), end="", highlight=False)
        return

    token = CancellationToken()
    with cancel_on_interrupt(token):
        run_continuous(
            render,
            token,
            console=_console,
            interval=settings.refresh_interval_seconds,
        )
