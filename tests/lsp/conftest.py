from __future__ import annotations

from pathlib import Path

import pytest
from lsprotocol.types import Position

from styled_theme.lsp import TextDocumentView, ThemeLanguageFeatures
from styled_theme.service import ThemeService
from styled_theme.snapshot import ThemeTableProvider

DATA_DIR = Path(__file__).parent / "data"


def _make_uri(path: Path) -> str:
    return path.resolve().as_uri()


@pytest.fixture()
def features(provider: ThemeTableProvider, mui_theme) -> ThemeLanguageFeatures:
    provider.publish_tree(mui_theme, source="theme.ts")
    return ThemeLanguageFeatures(ThemeService(provider))


@pytest.fixture()
def card_document() -> TextDocumentView:
    path = DATA_DIR / "Card.styled.tsx"
    return TextDocumentView(uri=_make_uri(path), text=path.read_text(encoding="utf-8"), version=1)


@pytest.fixture()
def locate():
    """Return the position just past the first occurrence of a snippet."""

    def _locate(snippet: str, text: str) -> Position:
        for idx, line in enumerate(text.splitlines()):
            col = line.find(snippet)
            if col != -1:
                return Position(line=idx, character=col + len(snippet))
        raise AssertionError(f"Snippet '{snippet}' not found in document")

    return _locate
