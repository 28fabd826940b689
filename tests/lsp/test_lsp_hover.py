from __future__ import annotations

from lsprotocol.types import MarkupKind, Position

from styled_theme.hover import Confidence, HoverResult
from styled_theme.lsp import TextDocumentView, ThemeLanguageFeatures, hover_markdown
from styled_theme.service import ThemeService
from styled_theme.snapshot import ThemeTableProvider


def test_hover_shows_resolved_value(
    features: ThemeLanguageFeatures, card_document: TextDocumentView, locate
) -> None:
    position = locate("theme.palette.pri", card_document.text)
    result = features.hover(card_document, position)
    assert result is not None
    assert result.contents.kind == MarkupKind.Markdown
    assert "palette.primary.main: #1976d2" in result.contents.value
    assert "Assuming" not in result.contents.value
    assert result.range.start.line == position.line
    start = card_document.lines[position.line].index("theme.palette")
    assert result.range.start.character == start
    assert result.range.end.character == start + len("theme.palette.primary.main")


def test_hover_on_bare_path_in_styled_file_is_inferred(
    features: ThemeLanguageFeatures, card_document: TextDocumentView, locate
) -> None:
    position = locate("padding: ${shape.border", card_document.text)
    result = features.hover(card_document, position)
    assert result is not None
    assert "shape.borderRadius: 4" in result.contents.value
    assert "*(Note: Assuming `shape` is derived from theme)*" in result.contents.value


def test_hover_outside_accessor_is_none(features: ThemeLanguageFeatures, card_document: TextDocumentView) -> None:
    assert features.hover(card_document, Position(line=0, character=3)) is None


def test_hover_without_snapshot_is_none(card_document: TextDocumentView, locate) -> None:
    features = ThemeLanguageFeatures(ThemeService(ThemeTableProvider()))
    assert features.hover(card_document, locate("theme.palette.pri", card_document.text)) is None


def test_hover_markdown_formats_booleans() -> None:
    result = HoverResult(path="flags.dense", value=True, confidence=Confidence.HIGH, start=0, end=5)
    assert hover_markdown(result) == "```typescript\nflags.dense: true\n```"
