"""Inline value annotations for every theme accessor in a visible range."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .cancellation import CancelToken, is_cancelled
from .config import DEFAULT_SETTINGS, EngineSettings
from .flatten import Scalar, is_scalar
from .matcher import iter_matches

logger = logging.getLogger(__name__)

ELLIPSIS = "..."

Span = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class InlayAnnotation:
    offset: int
    label: str
    path: str
    value: Scalar


def format_value(value: Any) -> str:
    """Render a scalar the way it reads in JavaScript source."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def truncate(display: str, width: int) -> str:
    if len(display) <= width:
        return display
    return display[: max(width - len(ELLIPSIS), 0)] + ELLIPSIS


def annotate(
    text: str,
    span: Span,
    table: Optional[Mapping],
    cancel: Optional[CancelToken] = None,
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> List[InlayAnnotation]:
    """Annotate each accessor in *span* with ``"= value"``.

    Cancellation is polled before each match; the annotations built so far are
    returned as soon as it is requested.
    """

    annotations: List[InlayAnnotation] = []
    if not table:
        return annotations
    start, end = span
    for expression in iter_matches(text, start, end, lookback=settings.matcher_lookback):
        if is_cancelled(cancel):
            logger.debug("Inlay scan cancelled after %d annotations", len(annotations))
            return annotations
        path = expression.resolved_path
        if not path:
            continue
        value = table.get(path)
        if not is_scalar(value):
            continue
        display = format_value(value)
        if isinstance(value, str):
            display = truncate(display, settings.inlay_max_width)
        annotations.append(
            InlayAnnotation(
                offset=expression.path_start + len(path),
                label=f"= {display}",
                path=path,
                value=value,
            )
        )
    return annotations


__all__ = ["InlayAnnotation", "Span", "ELLIPSIS", "format_value", "truncate", "annotate"]
