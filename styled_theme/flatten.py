"""Flatten a nested design-token theme into a dotted path lookup table."""

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional, Set, Union

from .errors import MalformedTreeError

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float, bool]
FlatThemeTable = Dict[str, Scalar]

DEFAULT_FUNCTION_KEYS = ("spacing",)


def describe_callable(func: Callable[..., Any]) -> str:
    """Return the marker stored in place of a function-valued token."""

    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return "function() => string | number"
    positional = [
        param
        for param in parameters
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD, param.VAR_POSITIONAL)
    ]
    argument = "factor" if positional else ""
    return f"function({argument}) => string | number"


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def flatten(root: Mapping, *, function_keys: Iterable[str] = DEFAULT_FUNCTION_KEYS) -> FlatThemeTable:
    """Flatten *root* depth-first into ``{"a.b.c": leaf}``.

    Empty mappings and ``None`` leaves are dropped. Callables are kept only
    under one of *function_keys*, as a descriptive string. Lists and tuples
    are opaque leaves stored as compact JSON text.

    Raises :class:`MalformedTreeError` for cycles, invalid keys, unsupported
    leaf types and leaves that collide on the same path.
    """

    if not isinstance(root, Mapping):
        raise MalformedTreeError(
            f"Theme root must be a mapping, got {type(root).__name__}.",
            hint="Export the theme object itself, not a factory or module.",
        )
    result: FlatThemeTable = {}
    _flatten_into(root, "", result, set(), frozenset(function_keys))
    logger.debug("Flattened theme into %d paths", len(result))
    return result


def _flatten_into(
    node: Mapping,
    parent: str,
    result: FlatThemeTable,
    visiting: Set[int],
    function_keys: frozenset,
) -> None:
    marker = id(node)
    if marker in visiting:
        raise MalformedTreeError("Theme tree contains a cycle.", path=parent or None)
    visiting.add(marker)
    try:
        for key, value in node.items():
            if not isinstance(key, str) or not key:
                raise MalformedTreeError(f"Invalid theme key {key!r}.", path=parent or None)
            path = f"{parent}.{key}" if parent else key
            if isinstance(value, Mapping):
                if value:
                    _flatten_into(value, path, result, visiting, function_keys)
                continue
            leaf = _leaf_value(key, value, path, function_keys)
            if leaf is None:
                continue
            if path in result:
                raise MalformedTreeError("Two theme leaves flatten to the same path.", path=path)
            result[path] = leaf
    finally:
        visiting.discard(marker)


def _leaf_value(
    key: str,
    value: Any,
    path: str,
    function_keys: frozenset,
) -> Optional[Scalar]:
    if value is None:
        return None
    if is_scalar(value):
        return value
    if isinstance(value, (list, tuple)):
        return _serialize_array(value, path)
    if callable(value):
        return describe_callable(value) if key in function_keys else None
    raise MalformedTreeError(f"Unsupported theme value of type {type(value).__name__}.", path=path)


def _serialize_array(value: Any, path: str) -> str:
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise MalformedTreeError(f"Array value cannot be serialized: {exc}", path=path) from exc


__all__ = [
    "Scalar",
    "FlatThemeTable",
    "DEFAULT_FUNCTION_KEYS",
    "describe_callable",
    "is_scalar",
    "flatten",
]
