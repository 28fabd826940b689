"""Engine settings and workspace configuration support."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .errors import ThemeConfigError

CONFIG_FILENAMES = ("styled-theme.toml", ".styledthemerc")


@dataclass(frozen=True)
class EngineSettings:
    """Tunable limits and switches shared by the query operations."""

    # Keys whose callable values are kept as a descriptive marker.
    function_keys: Tuple[str, ...] = ("spacing",)
    # How far the matcher scans backwards to classify an accessor.
    matcher_lookback: int = 200
    # Lines on each side of the cursor searched for a styled template tag.
    hover_window_lines: int = 10
    inlay_max_width: int = 20
    completion_requires_template: bool = False
    styled_file_suffixes: Tuple[str, ...] = (
        ".styled.ts",
        ".styled.tsx",
        ".styled.js",
        ".styled.jsx",
    )
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


DEFAULT_SETTINGS = EngineSettings()


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _as_tuple(value: Any, key: str) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    raise ThemeConfigError(f"Setting '{key}' must be a string or a list of strings.", hint="Use a list such as [\"spacing\"].")


def _as_positive_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ThemeConfigError(f"Setting '{key}' must be an integer.")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ThemeConfigError(f"Setting '{key}' must be an integer.") from exc
    if number < 1:
        raise ThemeConfigError(f"Setting '{key}' must be at least 1.")
    return number


def parse_settings(data: Dict[str, Any]) -> EngineSettings:
    """Build :class:`EngineSettings` from a decoded configuration mapping.

    A ``[theme]`` table is used when present, otherwise the top level.
    Unknown keys are kept in ``raw`` and otherwise ignored.
    """

    section = data.get("theme") if isinstance(data.get("theme"), dict) else data
    known = {item.name for item in fields(EngineSettings)} - {"raw"}
    values: Dict[str, Any] = {}
    for key in ("function_keys", "styled_file_suffixes"):
        if key in section:
            values[key] = _as_tuple(section[key], key)
    for key in ("matcher_lookback", "hover_window_lines", "inlay_max_width"):
        if key in section:
            values[key] = _as_positive_int(section[key], key)
    if "inlay_max_width" in values and values["inlay_max_width"] < 4:
        raise ThemeConfigError("Setting 'inlay_max_width' must leave room for the ellipsis (minimum 4).")
    if "completion_requires_template" in section:
        values["completion_requires_template"] = bool(section["completion_requires_template"])
    extras = {key: value for key, value in section.items() if key not in known}
    return EngineSettings(raw=extras, **values)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_settings(root: Path, explicit: Optional[Path] = None) -> EngineSettings:
    """Load settings for a workspace root, falling back to defaults."""

    config_path = locate_config_file(root.resolve(), explicit)
    if config_path is None:
        return DEFAULT_SETTINGS
    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (OSError, ValueError) as exc:
        raise ThemeConfigError(f"Could not read settings file: {exc}", path=str(config_path)) from exc
    if not isinstance(data, dict):
        raise ThemeConfigError("Settings file must contain a table/object.", path=str(config_path))
    return parse_settings(data)


__all__ = [
    "EngineSettings",
    "DEFAULT_SETTINGS",
    "CONFIG_FILENAMES",
    "parse_settings",
    "locate_config_file",
    "load_settings",
]
