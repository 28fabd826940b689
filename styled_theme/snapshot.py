"""Versioned theme table snapshots and the provider that publishes them."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Iterator, List, Optional

from .config import DEFAULT_SETTINGS, EngineSettings
from .errors import MalformedTreeError
from .flatten import Scalar, flatten
from .observability import log_snapshot_event

logger = logging.getLogger(__name__)

InvalidationListener = Callable[[Optional["ThemeSnapshot"]], None]


class ThemeSnapshot(Mapping):
    """Immutable, versioned view over one flattened theme table."""

    __slots__ = ("_table", "version", "created_at", "source")

    def __init__(self, table: Mapping, *, version: int, source: Optional[str] = None) -> None:
        self._table = MappingProxyType(dict(table))
        self.version = version
        self.created_at = time.time()
        self.source = source

    def __getitem__(self, path: str) -> Scalar:
        return self._table[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ThemeSnapshot(version={self.version}, paths={len(self._table)}, source={self.source!r})"

    @property
    def table(self) -> Mapping:
        return self._table


class ThemeTableProvider:
    """Owns the current snapshot and swaps it atomically on each publish.

    Readers call :meth:`get_current_snapshot` once per operation and keep the
    returned object; publishing replaces the reference in a single assignment
    so a reader never sees a partially built table. The lock only serialises
    writers so version numbers stay monotonic.
    """

    def __init__(self, settings: EngineSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self._snapshot: Optional[ThemeSnapshot] = None
        self._version = 0
        self._write_lock = threading.Lock()
        self._listeners: List[InvalidationListener] = []

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_current_snapshot(self) -> Optional[ThemeSnapshot]:
        return self._snapshot

    @property
    def version(self) -> int:
        snapshot = self._snapshot
        return snapshot.version if snapshot is not None else 0

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def publish_tree(self, tree: Mapping, *, source: Optional[str] = None) -> ThemeSnapshot:
        """Flatten *tree* and publish it.

        On :class:`MalformedTreeError` the previous snapshot stays published
        and the error is re-raised to the caller.
        """

        try:
            table = flatten(tree, function_keys=self.settings.function_keys)
        except MalformedTreeError as exc:
            log_snapshot_event(
                "rejected",
                version=self.version,
                source=source,
                reason=exc.format(),
                level=logging.ERROR,
            )
            raise
        return self.publish_table(table, source=source)

    def publish_table(self, table: Mapping, *, source: Optional[str] = None) -> ThemeSnapshot:
        with self._write_lock:
            self._version += 1
            snapshot = ThemeSnapshot(table, version=self._version, source=source)
            self._snapshot = snapshot
        log_snapshot_event("published", version=snapshot.version, paths=len(snapshot), source=source)
        self._notify(snapshot)
        return snapshot

    def retract(self) -> None:
        """Drop the current snapshot, e.g. when the generated table is deleted."""

        with self._write_lock:
            previous = self._snapshot
            self._snapshot = None
        if previous is not None:
            log_snapshot_event("retracted", version=previous.version, source=previous.source, level=logging.WARNING)
        self._notify(None)

    # ------------------------------------------------------------------
    # Invalidation signal
    # ------------------------------------------------------------------
    def add_listener(self, listener: InvalidationListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""

        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def invalidate(self) -> None:
        """Ask listeners to re-run their queries against the current snapshot."""

        self._notify(self._snapshot)

    def _notify(self, snapshot: Optional[ThemeSnapshot]) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:  # noqa: BLE001
                logger.exception("Theme invalidation listener %r failed", listener)


__all__ = ["ThemeSnapshot", "ThemeTableProvider", "InvalidationListener"]
