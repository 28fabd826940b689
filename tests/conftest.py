from __future__ import annotations

from typing import Any, Dict

import pytest

from styled_theme.config import EngineSettings
from styled_theme.flatten import flatten
from styled_theme.snapshot import ThemeTableProvider


def _mui_theme() -> Dict[str, Any]:
    return {
        "palette": {
            "primary": {
                "main": "#1976d2",
                "light": "#42a5f5",
                "dark": "#1565c0",
                "contrastText": "#fff",
            },
            "secondary": {
                "main": "#9c27b0",
                "light": "#ba68c8",
                "dark": "#7b1fa2",
                "contrastText": "#fff",
            },
            "error": {"main": "#d32f2f"},
            "common": {"black": "#000", "white": "#fff"},
        },
        "typography": {
            "fontFamily": '"Roboto", "Helvetica", "Arial", sans-serif',
            "fontSize": 14,
            "h1": {"fontSize": "2.5rem"},
        },
        "spacing": lambda factor: f"{factor * 8}px",
        "shape": {"borderRadius": 4},
        "breakpoints": {
            "keys": ["xs", "sm", "md", "lg", "xl"],
            "values": {"xs": 0, "sm": 600, "md": 900, "lg": 1200, "xl": 1536},
        },
        "zIndex": {"appBar": 1100, "drawer": 1200},
        "transitions": {},
        "customProperty": "customValue",
        "customObject": {
            "nestedKey": "nestedValue",
            "deeplyNested": {"value": 123},
        },
    }


@pytest.fixture()
def mui_theme() -> Dict[str, Any]:
    return _mui_theme()


@pytest.fixture()
def mui_table(mui_theme: Dict[str, Any]) -> Dict[str, Any]:
    return flatten(mui_theme)


@pytest.fixture()
def palette_table() -> Dict[str, str]:
    return {
        "palette.primary.main": "#1976d2",
        "palette.secondary.main": "#9c27b0",
    }


@pytest.fixture()
def settings() -> EngineSettings:
    return EngineSettings()


@pytest.fixture()
def provider(settings: EngineSettings) -> ThemeTableProvider:
    return ThemeTableProvider(settings)
