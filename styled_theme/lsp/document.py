"""Offset/position bookkeeping for one text document."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Tuple

from lsprotocol.types import Position, Range

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class TextDocumentView:
    """Maps LSP ``Position`` values onto character offsets of ``text``."""

    uri: str
    text: str
    version: int = 0
    lines: List[str] = field(init=False)
    _line_offsets: List[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._set_text(self.text)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def update(self, text: str, version: int) -> None:
        self._set_text(text)
        self.version = version

    def offset_at(self, position: Position) -> int:
        line_index = min(max(position.line, 0), len(self._line_offsets) - 1)
        column = min(max(position.character, 0), self._line_length(line_index))
        return self._line_offsets[line_index] + column

    def position_at(self, offset: int) -> Position:
        offset = min(max(offset, 0), len(self.text))
        line_index = bisect_right(self._line_offsets, offset) - 1
        return Position(line=line_index, character=offset - self._line_offsets[line_index])

    def range_of(self, start: int, end: int) -> Range:
        return Range(start=self.position_at(start), end=self.position_at(end))

    def span_of(self, range_: Range) -> Tuple[int, int]:
        return self.offset_at(range_.start), self.offset_at(range_.end)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _line_length(self, line_index: int) -> int:
        return len(self.lines[line_index])

    def _set_text(self, text: str) -> None:
        self.text = text
        self.lines = _LINE_BREAK_RE.split(text)
        self._line_offsets = [0] + [match.end() for match in _LINE_BREAK_RE.finditer(text)]


__all__ = ["TextDocumentView"]
