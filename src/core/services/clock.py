"""Servicio `now`: un instante en IST, UTC y zona local.

Por qué separar de la CLI:
- `take_snapshot` acepta el instante y la zona local inyectados, así los tests
  no dependen del reloj ni del TZ del host.
- El bucle continuo recibe un token de cancelación explícito en lugar de
  leer señales del SO por su cuenta.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rich.console import Console

from core.domain.models import TimeSnapshot
from core.services.cancellation import CancellationToken

logger = logging.getLogger(__name__)

FAREWELL_MESSAGE = "Exiting..."


def load_zone(name: str) -> tzinfo | None:
    """Resuelve una zona IANA; None si no existe o el nombre es inválido."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        # OSError: el nombre apunta a un directorio de tzdata (p.ej. "Asia").
        logger.debug("timezone %r unavailable: %s", name, exc)
        return None


def take_snapshot(
    now: datetime | None = None,
    *,
    ist_zone: tzinfo | None,
    local_zone: tzinfo | None = None,
) -> TimeSnapshot:
    """Convierte un único instante a las tres vistas.

    `now` naive se interpreta como hora local del host (igual que `astimezone`).
    Sin `local_zone` se usa la zona del host.
    """

    instant = now if now is not None else datetime.now(timezone.utc)
    local = instant.astimezone(local_zone) if local_zone is not None else instant.astimezone()
    return TimeSnapshot(
        ist=instant.astimezone(ist_zone) if ist_zone is not None else None,
        utc=instant.astimezone(timezone.utc),
        local=local,
    )


def _millis(dt: datetime) -> str:
    return f"{dt.microsecond // 1000:03d}"


def format_24h(dt: datetime) -> str:
    return f"{dt:%Y-%m-%d %H:%M:%S}.{_millis(dt)}"


def format_12h(dt: datetime) -> str:
    # %I/%p dependen del locale; se calculan a mano.
    hour = dt.hour % 12 or 12
    marker = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%Y-%m-%d} {hour:02d}:{dt:%M:%S}.{_millis(dt)} {marker}"


def run_continuous(
    render: Callable[[], str],
    token: CancellationToken,
    *,
    console: Console,
    interval: float = 0.1,
) -> int:
    """Redibuja `render()` cada `interval` segundos hasta que se cancele `token`.

    El token se consulta una vez por iteración, así que la latencia máxima de
    cancelación es `interval`. Devuelve el número de frames dibujados.
    """

    frames = 0
    while not token.cancelled:
        console.clear()
        console.print(render(), end="", highlight=False)
        frames += 1
        if token.wait(interval):
            break

    console.print()
    console.print(FAREWELL_MESSAGE, markup=False, highlight=False)
    logger.debug("continuous mode stopped after %d frames", frames)
    return frames
