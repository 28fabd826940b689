"""Next-segment completion over a flattened theme table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, List, Optional

from .cancellation import CancelToken, is_cancelled
from .config import DEFAULT_SETTINGS, EngineSettings
from .flatten import Scalar
from .matcher import in_template_literal, match_at

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One completion entry.

    Intermediate suggestions have deeper keys beneath them and tell the caller
    to re-trigger completion after insertion; terminal ones carry the value.
    """

    segment: str
    is_intermediate: bool
    full_path: str
    value: Optional[Scalar] = None


def node_boundary(typed_prefix: str) -> str:
    """Return *typed_prefix* cut back to just after its last ``.``."""

    return typed_prefix[: typed_prefix.rfind(".") + 1]


def complete(
    typed_prefix: str,
    table: Optional[Mapping],
    *,
    cancel: Optional[CancelToken] = None,
) -> List[Suggestion]:
    """Suggest the next path segment for every key extending *typed_prefix*.

    Results keep first-seen table order. A cancelled scan returns ``[]``.
    """

    if not table:
        return []
    boundary = node_boundary(typed_prefix)
    segments: Dict[str, bool] = {}
    for path in table:
        if is_cancelled(cancel):
            logger.debug("Completion for %r cancelled", typed_prefix)
            return []
        if not path.startswith(typed_prefix):
            continue
        remainder = path[len(boundary):]
        segment, dot, _ = remainder.partition(".")
        if not segment:
            continue
        segments[segment] = segments.get(segment, False) or bool(dot)
    suggestions: List[Suggestion] = []
    for segment, intermediate in segments.items():
        full_path = boundary + segment
        suggestions.append(
            Suggestion(
                segment=segment,
                is_intermediate=intermediate,
                full_path=full_path,
                value=None if intermediate else table.get(full_path),
            )
        )
    return suggestions


def complete_at(
    text: str,
    offset: int,
    table: Optional[Mapping],
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
    cancel: Optional[CancelToken] = None,
) -> List[Suggestion]:
    """Complete the accessor typed up to *offset* in *text*."""

    if not table:
        return []
    if settings.completion_requires_template and not in_template_literal(text, offset):
        return []
    point = match_at(text, offset, lookback=settings.matcher_lookback)
    if point is None:
        return []
    return complete(point.typed, table, cancel=cancel)


__all__ = ["Suggestion", "node_boundary", "complete", "complete_at"]
