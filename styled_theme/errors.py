"""Unified error model for the theme resolution engine."""

from __future__ import annotations

from typing import Optional


class ThemeError(Exception):
    """Base class for errors surfaced while building or configuring theme data."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        if self.path:
            meta_parts.append(f"at '{self.path}'")
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class MalformedTreeError(ThemeError):
    """Raised when a theme tree is cyclic or cannot be flattened."""

    code = "malformed-tree"


class ThemeConfigError(ThemeError):
    """Raised when an engine settings file cannot be read or parsed."""

    code = "invalid-config"


__all__ = [
    "ThemeError",
    "MalformedTreeError",
    "ThemeConfigError",
]
