"""Centralised logging helpers for the theme engine."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = "styled_theme") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def log_snapshot_event(
    event: str,
    *,
    version: Optional[int],
    paths: Optional[int] = None,
    source: Optional[str] = None,
    reason: Optional[str] = None,
    level: int = logging.INFO,
    logger: Optional[logging.Logger] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured log entry describing a snapshot lifecycle change."""

    payload: Dict[str, Any] = {
        "version": version,
        "source": source or "unknown",
    }
    if paths is not None:
        payload["paths"] = paths
    if reason:
        payload["reason"] = reason
    if extras:
        payload.update(extras)
    target_logger = logger or get_logger("styled_theme.snapshot")
    target_logger.log(
        level,
        "Theme snapshot %s",
        event,
        extra={"styled_theme_event": f"snapshot_{event}", "styled_theme_data": payload},
    )


__all__ = ["get_logger", "log_snapshot_event"]
