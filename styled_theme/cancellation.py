"""Cooperative cancellation for long range scans."""

from __future__ import annotations

import threading
from typing import Optional, Protocol


class CancelToken(Protocol):
    @property
    def is_cancellation_requested(self) -> bool: ...


class CancellationToken:
    """Thread-safe flag polled by scans between candidates."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()


def is_cancelled(token: Optional[CancelToken]) -> bool:
    return token is not None and token.is_cancellation_requested


__all__ = ["CancelToken", "CancellationToken", "is_cancelled"]
