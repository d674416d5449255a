"""Fuente HTTP: endpoint de trace de Cloudflare.

Hace un único GET y devuelve el cuerpo tal cual. El status HTTP no se
interpreta: una respuesta no-2xx se parsea igual que una 2xx.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import TraceFetchError

logger = logging.getLogger(__name__)


class HttpTraceSource:
    """Implementa `core.interfaces.ports.TraceSource` sobre httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.trace_url

    def fetch(self) -> str:
        logger.debug("GET %s", self.url)
        try:
            with build_client(self._settings, transport=self._transport) as client:
                response = client.get(self.url)
                body = response.text
        except httpx.HTTPError as exc:
            logger.debug("trace request failed: %r", exc)
            raise TraceFetchError(str(exc) or exc.__class__.__name__) from exc

        logger.debug("HTTP %s, %d bytes", response.status_code, len(body))
        return body
