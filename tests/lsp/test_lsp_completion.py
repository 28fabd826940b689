from __future__ import annotations

from lsprotocol.types import CompletionItemKind, Position

from styled_theme.lsp import TextDocumentView, ThemeLanguageFeatures
from styled_theme.lsp.features import TRIGGER_SUGGEST_COMMAND
from styled_theme.service import ThemeService
from styled_theme.snapshot import ThemeTableProvider


def test_palette_completion_retriggers_for_nested_keys(
    features: ThemeLanguageFeatures, card_document: TextDocumentView, locate
) -> None:
    position = locate("margin: ${({ theme }) => theme.palette.", card_document.text)
    completions = features.completion(card_document, position)
    labels = [item.label for item in completions.items]
    assert labels == ["primary", "secondary", "error", "common"]
    primary = completions.items[0]
    assert primary.kind == CompletionItemKind.Module
    assert primary.insert_text == "primary."
    assert primary.command is not None
    assert primary.command.command == TRIGGER_SUGGEST_COMMAND
    sort_keys = [item.sort_text for item in completions.items]
    assert sort_keys == sorted(sort_keys)


def test_terminal_completion_documents_value(features: ThemeLanguageFeatures) -> None:
    document = TextDocumentView(uri="file:///Title.tsx", text="${theme.typography.font")
    completions = features.completion(document, Position(line=0, character=len(document.text)))
    by_label = {item.label: item for item in completions.items}
    assert set(by_label) == {"fontFamily", "fontSize"}
    font_size = by_label["fontSize"]
    assert font_size.kind == CompletionItemKind.Property
    assert font_size.insert_text == "fontSize"
    assert font_size.command is None
    assert "Value: `14`" in font_size.documentation.value


def test_completion_without_snapshot_is_empty(card_document: TextDocumentView, locate) -> None:
    features = ThemeLanguageFeatures(ThemeService(ThemeTableProvider()))
    completions = features.completion(card_document, locate("theme.palette.", card_document.text))
    assert completions.items == []
