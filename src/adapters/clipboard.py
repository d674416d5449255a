"""Portapapeles del sistema vía pyperclip."""

from __future__ import annotations

import logging

import pyperclip

from core.domain.errors import ClipboardError

logger = logging.getLogger(__name__)


class SystemClipboard:
    """Implementa `core.interfaces.ports.ClipboardWriter`."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc
        logger.debug("copied %d chars to clipboard", len(text))

    def probe(self) -> str:
        """Lee el portapapeles sin modificarlo (para `doctor`)."""

        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc
