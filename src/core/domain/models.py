"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Son valores transitorios: viven una invocación (o un ciclo de render).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TraceInfo(BaseModel):
    """Respuesta del endpoint de trace ya parseada.

    Solo `ip` es contractual; el resto de claves se conserva por si sirve
    para diagnóstico (`--verbose`).
    """

    model_config = ConfigDict(frozen=True)

    entries: dict[str, str] = Field(
        default_factory=dict,
        description="Pares key=value en orden de aparición (primera ocurrencia gana).",
    )
    ip: str = Field(
        default="",
        description="IP resuelta; cadena vacía si no hay línea `ip=` o está vacía.",
    )

    @property
    def connected(self) -> bool:
        return bool(self.ip)


class TimeSnapshot(BaseModel):
    """Un instante visto en IST, UTC y la zona local del host."""

    model_config = ConfigDict(frozen=True)

    ist: datetime | None = Field(
        default=None,
        description="Vista IST; None si la zona no pudo resolverse.",
    )
    utc: datetime = Field(..., description="Vista UTC.")
    local: datetime = Field(..., description="Vista en la zona local del host.")

    @property
    def show_local(self) -> bool:
        """False cuando la vista local es el mismo instante absoluto que IST.

        Se comparan datetimes con zona (instantes), no la zona ni la hora de pared.
        """

        if self.ist is None:
            return True
        return self.local != self.ist


class IpOutcome(str, Enum):
    """Resultado observable del comando `ip`."""

    COPIED = "copied"
    COPY_FAILED = "copy_failed"
    NOT_CONNECTED = "not_connected"
    FETCH_FAILED = "fetch_failed"

    @property
    def is_failure(self) -> bool:
        return self in (IpOutcome.NOT_CONNECTED, IpOutcome.FETCH_FAILED)
