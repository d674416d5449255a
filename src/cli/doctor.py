"""Doctor command for environment diagnostics."""

from __future__ import annotations

from datetime import datetime

import httpx
import typer
from rich.console import Console

from adapters.clipboard import SystemClipboard
from adapters.http_client import build_client
from cli.settings import load_settings
from cli.ui_components import build_doctor_table
from core.config import AppSettings, get_user_env_file
from core.domain.errors import ClipboardError
from core.services.clock import load_zone

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.trace_url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _check_clipboard() -> tuple[bool, str]:
    """Read-only probe: never overwrites what the user has copied."""

    try:
        SystemClipboard().probe()
        return True, "OK"
    except ClipboardError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = build_doctor_table()

    # Config
    table.add_row("Trace URL", "OK", settings.trace_url)
    table.add_row(
        "HTTP timeout",
        "OK",
        "httpx default" if settings.http_timeout_seconds is None else f"{settings.http_timeout_seconds}s",
    )
    table.add_row("User env file", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_http, detail_http = _check_http(settings)
    table.add_row("Trace endpoint", "OK" if ok_http else "FAIL", detail_http)

    ok_clip, detail_clip = _check_clipboard()
    table.add_row("Clipboard", "OK" if ok_clip else "FAIL", detail_clip)

    ist_ok = load_zone(settings.ist_zone_name) is not None
    table.add_row(
        "IST timezone",
        "OK" if ist_ok else "FAIL",
        settings.ist_zone_name if ist_ok else f"{settings.ist_zone_name} not found (install tzdata)",
    )
    local = datetime.now().astimezone()
    table.add_row("Local timezone", "OK", f"{local.tzname()} (UTC{local:%z})")

    _console.print(table)

    if not ok_clip:
        _console.print(
            "\n[yellow]Note:[/yellow] On Linux `kc ip` needs xclip, xsel or wl-clipboard to copy the address."
        )
