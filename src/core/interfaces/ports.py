"""Contratos de los recursos externos (red y portapapeles).

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el adaptador real (httpx/pyperclip) y los fakes de test sean
  intercambiables.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TraceSource(Protocol):
    """Fuente del texto de trace.

    Reglas de diseño:
    - `fetch` es síncrono: una sola petición por invocación.
    - Errores de transporte se elevan como `TraceFetchError`.
    """

    def fetch(self) -> str:
        """Devuelve el cuerpo completo de la respuesta."""

        ...


@runtime_checkable
class ClipboardWriter(Protocol):
    """Escritura en el portapapeles del sistema; falla con `ClipboardError`."""

    def copy(self, text: str) -> None: ...
