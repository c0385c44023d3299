"""
Cancellation support for long-running bulk selections.
"""
from __future__ import annotations

import threading


class BulkSelectError(Exception):
    """Bulk selection did not complete."""
    pass


class BulkSelectCancelled(BulkSelectError):
    """Bulk selection was cancelled before it finished."""
    pass


class CancelToken:
    """
    Thread-safe cancellation flag checked by the bulk fetch loop.

    The loop checks the token before each request, so cancellation takes
    effect at the next page boundary; an in-flight request is not aborted.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise BulkSelectCancelled("Bulk selection cancelled")
