"""Resolve the theme value under a cursor position."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import DEFAULT_SETTINGS, EngineSettings
from .flatten import Scalar
from .matcher import AccessExpression, iter_matches, line_bounds, match_at, styled_tag_nearby, token_run_at


class Confidence(Enum):
    HIGH = "high"
    INFERRED = "inferred"


@dataclass(frozen=True, slots=True)
class HoverResult:
    path: str
    value: Scalar
    confidence: Confidence
    start: int
    end: int

    @property
    def is_inferred(self) -> bool:
        return self.confidence is Confidence.INFERRED


def hover(
    text: str,
    offset: int,
    table: Optional[Mapping],
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
    document_name: Optional[str] = None,
) -> Optional[HoverResult]:
    """Resolve the hovered path, trying a recognised accessor first.

    The fallback tier accepts a bare dotted run that equals a table key when
    the surrounding text looks like a styled-components interpolation. It can
    match unrelated identifiers that happen to share a key's name, so its
    results are always tagged :attr:`Confidence.INFERRED`.
    """

    if not table:
        return None

    expression = _accessor_at(text, offset, settings)
    if expression is not None:
        path = expression.resolved_path
        if path and path in table:
            return HoverResult(
                path=path,
                value=table[path],
                confidence=Confidence.HIGH,
                start=expression.anchor_start,
                end=expression.path_start + len(path),
            )

    run = token_run_at(text, offset)
    if run is None:
        return None
    start, end, candidate = run
    if candidate not in table:
        return None
    if not _looks_like_styled_usage(text, offset, settings, document_name):
        return None
    return HoverResult(
        path=candidate,
        value=table[candidate],
        confidence=Confidence.INFERRED,
        start=start,
        end=end,
    )


def _accessor_at(text: str, offset: int, settings: EngineSettings) -> Optional[AccessExpression]:
    point = match_at(text, offset, lookback=settings.matcher_lookback)
    if point is not None:
        return point.expression
    # Cursor on the accessor head (`theme`, `props`, an arrow alias).
    run = token_run_at(text, offset)
    if run is None:
        return None
    run_start, run_end, _ = run
    _, line_end = line_bounds(text, offset)
    expression = next(iter_matches(text, run_start, line_end, lookback=settings.matcher_lookback), None)
    if expression is not None and expression.anchor_start < run_end:
        return expression
    return None


def _looks_like_styled_usage(
    text: str,
    offset: int,
    settings: EngineSettings,
    document_name: Optional[str],
) -> bool:
    line_start, line_end = line_bounds(text, offset)
    if "${" not in text[line_start:line_end]:
        return False
    if document_name and document_name.endswith(settings.styled_file_suffixes):
        return True
    return styled_tag_nearby(text, offset, settings.hover_window_lines)


__all__ = ["Confidence", "HoverResult", "hover"]
