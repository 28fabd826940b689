"""Query facade that reads one provider snapshot per operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from .cancellation import CancelToken
from .completion import Suggestion, complete_at
from .config import EngineSettings
from .hover import HoverResult, hover
from .inlay import InlayAnnotation, Span, annotate
from .snapshot import ThemeTableProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryStatus(Enum):
    OK = "ok"
    NO_MATCH = "no-match"
    MISSING_TABLE = "missing-table"


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    status: QueryStatus
    value: T
    version: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK


class ThemeService:
    """Binds the pure query functions to a :class:`ThemeTableProvider`.

    Each call takes exactly one snapshot reference, so a publish that lands
    mid-query cannot mix two tables into one answer.
    """

    def __init__(self, provider: ThemeTableProvider, settings: Optional[EngineSettings] = None) -> None:
        self.provider = provider
        self.settings = settings or provider.settings

    def complete_at(
        self,
        text: str,
        offset: int,
        *,
        cancel: Optional[CancelToken] = None,
    ) -> QueryResult[List[Suggestion]]:
        snapshot = self.provider.get_current_snapshot()
        if snapshot is None:
            return QueryResult(QueryStatus.MISSING_TABLE, [])
        suggestions = complete_at(text, offset, snapshot, settings=self.settings, cancel=cancel)
        status = QueryStatus.OK if suggestions else QueryStatus.NO_MATCH
        return QueryResult(status, suggestions, snapshot.version)

    def hover(
        self,
        text: str,
        offset: int,
        *,
        document_name: Optional[str] = None,
    ) -> QueryResult[Optional[HoverResult]]:
        snapshot = self.provider.get_current_snapshot()
        if snapshot is None:
            return QueryResult(QueryStatus.MISSING_TABLE, None)
        result = hover(text, offset, snapshot, settings=self.settings, document_name=document_name)
        status = QueryStatus.OK if result is not None else QueryStatus.NO_MATCH
        return QueryResult(status, result, snapshot.version)

    def annotate(
        self,
        text: str,
        span: Span,
        *,
        cancel: Optional[CancelToken] = None,
    ) -> QueryResult[List[InlayAnnotation]]:
        snapshot = self.provider.get_current_snapshot()
        if snapshot is None:
            return QueryResult(QueryStatus.MISSING_TABLE, [])
        annotations = annotate(text, span, snapshot, cancel, settings=self.settings)
        status = QueryStatus.OK if annotations else QueryStatus.NO_MATCH
        logger.debug("Annotated %d accessors against snapshot v%d", len(annotations), snapshot.version)
        return QueryResult(status, annotations, snapshot.version)


__all__ = ["QueryStatus", "QueryResult", "ThemeService"]
