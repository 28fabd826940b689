"""Recognise theme accessor expressions in styled-components source text.

The recogniser is a small hand written grammar rather than full analysis::

    accessor := "theme." PATH
              | "props.theme." PATH
              | "(" "{" ... "theme" ... "}" ")" "=>" "theme." PATH
              | "(" IDENT ")" "=>" IDENT "." "theme." PATH
    PATH     := IDENT ("." IDENT)*

Every ``theme.`` anchor is located first and then classified by looking a
bounded distance backwards. Anything the grammar cannot vouch for, such as a
destructured ``theme`` bound under another name or an unknown qualifier in
``foo.theme.x``, produces no match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

DEFAULT_LOOKBACK = 200

_ANCHOR_RE = re.compile(r"(?<![\w$])theme\.")
_PATH_RE = re.compile(r"(?:[\w$]+(?:\.[\w$]+)*\.?)?")
_TYPED_PARAM_RE = re.compile(r"([\w$]+)\s*(?::.*)?", re.DOTALL)
_BINDING_TOKEN_RE = re.compile(r"[\w$]+|\.\.\.|\S")
_STYLED_TAG_RE = re.compile(
    r"(?<![\w$])(?:styled(?:\.[\w$]+|\s*\([^()`]*\))(?:\s*\.attrs\([^`]*?\))?|css|createGlobalStyle|keyframes)\s*`"
)


def _is_ident_char(char: str) -> bool:
    return char.isalnum() or char in "_$"


class AccessKind(Enum):
    """How the theme object was reached."""

    DIRECT = "direct"
    PROPS_QUALIFIED = "props"
    ARROW_DESTRUCTURED = "destructured"
    ALIASED_ARROW = "aliased-arrow"


@dataclass(frozen=True, slots=True)
class AccessExpression:
    """One recognised accessor; offsets index into the scanned text."""

    kind: AccessKind
    start: int
    anchor_start: int
    path_start: int
    path_end: int
    path: str

    @property
    def is_partial(self) -> bool:
        return not self.path or self.path.endswith(".")

    @property
    def resolved_path(self) -> str:
        return self.path.rstrip(".")


@dataclass(frozen=True, slots=True)
class PointMatch:
    """An accessor covering a cursor offset plus the path typed before it."""

    expression: AccessExpression
    typed: str


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------
def iter_matches(
    text: str,
    start: int = 0,
    end: Optional[int] = None,
    *,
    lookback: int = DEFAULT_LOOKBACK,
) -> Iterator[AccessExpression]:
    """Yield accessors whose ``theme`` anchor and path lie in ``[start, end)``."""

    limit = len(text) if end is None else min(end, len(text))
    for anchor in _ANCHOR_RE.finditer(text, max(start, 0)):
        anchor_start = anchor.start()
        if anchor_start >= limit:
            break
        path_match = _PATH_RE.match(text, anchor.end())
        path_end = path_match.end()
        if path_end > limit:
            continue
        classified = _classify(text, anchor_start, lookback)
        if classified is None:
            continue
        kind, accessor_start = classified
        yield AccessExpression(
            kind=kind,
            start=accessor_start,
            anchor_start=anchor_start,
            path_start=anchor.end(),
            path_end=path_end,
            path=path_match.group(0),
        )


def match_range(
    text: str,
    start: int = 0,
    end: Optional[int] = None,
    *,
    lookback: int = DEFAULT_LOOKBACK,
) -> List[AccessExpression]:
    return list(iter_matches(text, start, end, lookback=lookback))


def match_at(text: str, offset: int, *, lookback: int = DEFAULT_LOOKBACK) -> Optional[PointMatch]:
    """Return the longest accessor whose path covers or ends at *offset*."""

    if offset < 0 or offset > len(text):
        return None
    line_start, line_end = line_bounds(text, offset)
    best: Optional[AccessExpression] = None
    for expression in iter_matches(text, line_start, line_end, lookback=lookback):
        if not expression.path_start <= offset <= expression.path_end:
            continue
        if best is None or expression.path_end - expression.start > best.path_end - best.start:
            best = expression
    if best is None:
        return None
    return PointMatch(expression=best, typed=text[best.path_start:offset])


def token_run_at(text: str, offset: int) -> Optional[Tuple[int, int, str]]:
    """Return the dotted identifier run around *offset* as ``(start, end, run)``."""

    if offset < 0 or offset > len(text):
        return None
    start = offset
    while start > 0 and (_is_ident_char(text[start - 1]) or text[start - 1] == "."):
        start -= 1
    end = offset
    while end < len(text) and (_is_ident_char(text[end]) or text[end] == "."):
        end += 1
    while start < end and text[start] == ".":
        start += 1
    while end > start and text[end - 1] == ".":
        end -= 1
    if start == end:
        return None
    return start, end, text[start:end]


# ----------------------------------------------------------------------
# Template context heuristics
# ----------------------------------------------------------------------
def line_bounds(text: str, offset: int) -> Tuple[int, int]:
    line_start = text.rfind("\n", 0, offset) + 1
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)
    return line_start, line_end


def in_template_literal(text: str, offset: int) -> bool:
    """Guess whether *offset* sits inside a template literal or interpolation."""

    line_start, _ = line_bounds(text, offset)
    before = text[line_start:offset]
    if before.count("`") % 2 == 1:
        return True
    last_open = before.rfind("${")
    if last_open == -1:
        return False
    depth = 0
    for char in before[last_open + 1:]:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return False
    return depth > 0


def line_window(text: str, offset: int, lines: int) -> Tuple[int, int]:
    """Return offsets spanning *lines* lines either side of the line at *offset*."""

    low = offset
    for _ in range(lines + 1):
        index = text.rfind("\n", 0, low)
        if index == -1:
            low = 0
            break
        low = index
    else:
        low += 1
    high = offset
    for _ in range(lines + 1):
        index = text.find("\n", high)
        if index == -1:
            high = len(text)
            break
        high = index + 1
    return low, high


def styled_tag_nearby(text: str, offset: int, window_lines: int) -> bool:
    low, high = line_window(text, offset, window_lines)
    return _STYLED_TAG_RE.search(text, low, high) is not None


# ----------------------------------------------------------------------
# Classification
# ----------------------------------------------------------------------
def _classify(text: str, anchor_start: int, lookback: int) -> Optional[Tuple[AccessKind, int]]:
    floor = max(0, anchor_start - lookback)
    if anchor_start > 0 and text[anchor_start - 1] == ".":
        qualifier_end = anchor_start - 1
        qualifier_start = _scan_ident_back(text, qualifier_end, floor)
        qualifier = text[qualifier_start:qualifier_end]
        if not qualifier:
            return None
        if qualifier_start == 0 or text[qualifier_start - 1] != ".":
            arrow = _arrow_params_before(text, qualifier_start, floor)
            if arrow is not None:
                params, params_start = arrow
                parameter = _TYPED_PARAM_RE.fullmatch(params)
                if parameter is not None and parameter.group(1) == qualifier:
                    return AccessKind.ALIASED_ARROW, params_start
        if qualifier == "props":
            return AccessKind.PROPS_QUALIFIED, qualifier_start
        return None

    arrow = _arrow_params_before(text, anchor_start, floor)
    if arrow is not None:
        params, params_start = arrow
        inner = _destructure_inner(params)
        if inner is not None:
            binding = _theme_binding(inner)
            if binding == "shorthand":
                return AccessKind.ARROW_DESTRUCTURED, params_start
            if binding == "renamed":
                return None
    return AccessKind.DIRECT, anchor_start


def _scan_ident_back(text: str, end: int, floor: int) -> int:
    index = end
    while index > floor and _is_ident_char(text[index - 1]):
        index -= 1
    return index


def _skip_space_back(text: str, end: int, floor: int) -> int:
    index = end
    while index > floor and text[index - 1].isspace():
        index -= 1
    return index


def _arrow_params_before(text: str, position: int, floor: int) -> Optional[Tuple[str, int]]:
    """Return ``(params, start)`` when an arrow ``=>`` ends right before *position*."""

    index = _skip_space_back(text, position, floor)
    if index - 2 < floor or text[index - 2:index] != "=>":
        return None
    index = _skip_space_back(text, index - 2, floor)
    if index <= floor:
        return None
    if text[index - 1] == ")":
        close = index - 1
        depth = 0
        cursor = close
        while cursor >= floor:
            char = text[cursor]
            if char == ")":
                depth += 1
            elif char == "(":
                depth -= 1
                if depth == 0:
                    return text[cursor + 1:close].strip(), cursor
            cursor -= 1
        return None
    ident_start = _scan_ident_back(text, index, floor)
    if ident_start == index:
        return None
    return text[ident_start:index], ident_start


def _destructure_inner(params: str) -> Optional[str]:
    if not params.startswith("{"):
        return None
    depth = 0
    for index, char in enumerate(params):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return params[1:index]
    return None


def _theme_binding(inner: str) -> Optional[str]:
    tokens = _BINDING_TOKEN_RE.findall(inner)
    for index, token in enumerate(tokens):
        if token != "theme":
            continue
        previous = tokens[index - 1] if index > 0 else ""
        following = tokens[index + 1] if index + 1 < len(tokens) else ""
        if previous in (":", "...") or following == ":":
            return "renamed"
        return "shorthand"
    return None


__all__ = [
    "AccessKind",
    "AccessExpression",
    "PointMatch",
    "DEFAULT_LOOKBACK",
    "iter_matches",
    "match_range",
    "match_at",
    "token_run_at",
    "line_bounds",
    "line_window",
    "in_template_literal",
    "styled_tag_nearby",
]
