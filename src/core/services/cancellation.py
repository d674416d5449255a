"""Explicit cancellation token for the refresh loop."""

from __future__ import annotations

import time


class CancellationToken:
    """One-shot flag: once cancelled, stays cancelled.

    `cancel` only assigns an attribute, so it is safe to call from a signal
    handler that interrupts `wait`. No locks are taken.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def wait(self, timeout: float) -> bool:
        """Sleep `timeout` seconds, then report whether the token was cancelled."""

        if not self._cancelled:
            time.sleep(timeout)
        return self._cancelled
