"""Caller-supplied cancellation for long-running storage and graph operations.

A Cancellation can be cancelled explicitly from another thread, given a deadline, or both.  The
engine calls check() between storage reads and while walking the graph, so cancellation aborts
the operation promptly and no partial result escapes.
"""

import time
from threading import Event
from typing import TYPE_CHECKING

from governor.exc import OperationCancelledException

if TYPE_CHECKING:
    from governor.settings import Settings
    from typing import Optional


class Cancellation:
    def __init__(self, timeout=None):
        # type: (Optional[float]) -> None
        self._event = Event()
        self._deadline = time.monotonic() + timeout if timeout else None

    @classmethod
    def from_settings(cls, settings):
        # type: (Settings) -> Cancellation
        return cls(settings.enumeration_timeout or None)

    def cancel(self):
        # type: () -> None
        self._event.set()

    @property
    def cancelled(self):
        # type: () -> bool
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def check(self):
        # type: () -> None
        if self._event.is_set():
            raise OperationCancelledException("Operation cancelled by caller")
        if self.cancelled:
            raise OperationCancelledException("Operation deadline exceeded")


def check_cancelled(cancellation):
    # type: (Optional[Cancellation]) -> None
    if cancellation is not None:
        cancellation.check()
