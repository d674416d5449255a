"""Logging de diagnóstico (stderr, RichHandler).

La salida para el usuario va por `Console.print`; esto es solo para `--verbose`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # httpx loguea cada request en INFO; el adaptador ya lo hace en DEBUG.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
