"""Cooperative cancellation for collaborator calls.

Every network call the Poster makes is preceded by ``ctx.check()``: once a
context is cancelled (or its deadline has passed) no further call is issued.
A call already in flight is left to the transport to abort.
"""

from __future__ import annotations

import threading
import time

from reviewpost_core.errors import CallCancelledError


class CallContext:
    def __init__(self, timeout: float | None = None):
        self._cancelled = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        if self._cancelled.is_set():
            raise CallCancelledError("context cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise CallCancelledError("deadline exceeded")
