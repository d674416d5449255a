"""Errors raised by adapters and handled at the command boundary."""

from __future__ import annotations


class KcError(Exception):
    """Base class for every error the CLI knows how to report."""


class TraceFetchError(KcError):
    """The trace request could not be sent or its body could not be read."""


class ClipboardError(KcError):
    """The system clipboard rejected the write."""
