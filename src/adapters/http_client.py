"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout y headers en un solo sitio.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono.

    Sin `http_timeout_seconds` configurado se respeta el timeout por defecto
    de httpx (no se sobreescribe).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/plain,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.Client(follow_redirects=True, headers=headers, **kwargs)  # type: ignore[arg-type]
