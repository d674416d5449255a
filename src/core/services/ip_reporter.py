"""Servicio `ip`: resolver la IP pública, mostrarla y copiarla.

Flujo lineal:
1) GET al endpoint de trace (una vez, sin reintentos).
2) Parseo de la primera línea `ip=`.
3) Impresión y copia al portapapeles (fallo de copia no es fatal).
"""

from __future__ import annotations

import logging

from rich.console import Console

from core.domain.errors import ClipboardError, TraceFetchError
from core.domain.models import IpOutcome, TraceInfo
from core.interfaces.ports import ClipboardWriter, TraceSource

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "error fetching ip address."
NOT_CONNECTED_MESSAGE = "Couldn't find the ip address. Are you sure you are connected to network?"
COPIED_MESSAGE = "IP address copied to clipboard!"


def parse_trace(body: str) -> TraceInfo:
    """Parsea texto `key=value` separado por saltos de línea.

    Líneas sin `=` se ignoran. Para claves repetidas gana la primera, así que
    con varias líneas `ip=` solo cuenta la primera.
    """

    entries: dict[str, str] = {}
    for raw_line in body.splitlines():
        if "=" not in raw_line:
            continue
        key, value = raw_line.split("=", 1)
        if key not in entries:
            entries[key] = value.strip()

    return TraceInfo(entries=entries, ip=entries.get("ip", ""))


def resolve_ip(body: str) -> str:
    return parse_trace(body).ip


def report_ip(source: TraceSource, clipboard: ClipboardWriter, console: Console) -> IpOutcome:
    try:
        body = source.fetch()
    except TraceFetchError as exc:
        logger.debug("fetch failed: %s", exc)
        console.print(FETCH_FAILED_MESSAGE, markup=False, highlight=False)
        return IpOutcome.FETCH_FAILED

    trace = parse_trace(body)
    logger.debug("trace fields: %s", sorted(trace.entries))
    if not trace.connected:
        console.print(NOT_CONNECTED_MESSAGE, markup=False, highlight=False)
        return IpOutcome.NOT_CONNECTED

    console.print(f"ip address: {trace.ip}", markup=False, emoji=False, highlight=False)

    try:
        clipboard.copy(trace.ip)
    except ClipboardError as exc:
        console.print(f"Error copying to clipboard: {exc}", markup=False, highlight=False)
        return IpOutcome.COPY_FAILED

    console.print(COPIED_MESSAGE, markup=False, highlight=False)
    return IpOutcome.COPIED
