"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Las funciones devuelven strings con markup Rich; el `Console` decide si
  hay color (terminal) o texto plano (pipe/tests).
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from core.domain.models import TimeSnapshot
from core.services.clock import format_12h, format_24h

HEADING_STYLE = "blue"
VALUE_STYLE = "green"


def decorate(text: str, style: str | None) -> str:
    """Envuelve `text` en markup Rich; sin `style` solo lo escapa."""

    if not style:
        return escape(text)
    return f"[{style}]{escape(text)}[/{style}]"


def _block(heading: str, snapshot: TimeSnapshot, fmt) -> list[str]:
    lines = [f"{decorate(heading, HEADING_STYLE)}:", ""]
    if snapshot.ist is not None:
        lines.append(f"IST   : {decorate(fmt(snapshot.ist), VALUE_STYLE)}")
    lines.append(f"UTC   : {decorate(fmt(snapshot.utc), VALUE_STYLE)}")
    if snapshot.show_local:
        lines.append(f"Local : {decorate(fmt(snapshot.local), VALUE_STYLE)}")
    lines.append("")
    return lines


def render_snapshot(snapshot: TimeSnapshot) -> str:
    """Bloques "24-hour format" y "12-hour format" listos para `console.print`."""

    lines = _block("24-hour format", snapshot, format_24h)
    lines += _block("12-hour format", snapshot, format_12h)
    return "\n".join(lines) + "\n"


def build_doctor_table() -> Table:
    table = Table(title="kc doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
