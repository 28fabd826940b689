"""Convert theme query results into Language Server Protocol records."""

from __future__ import annotations

import logging
from typing import List, Optional

from lsprotocol.types import (
    Command,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    Hover,
    InlayHint,
    InlayHintKind,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from ..cancellation import CancelToken
from ..completion import Suggestion
from ..hover import HoverResult
from ..inlay import InlayAnnotation, format_value
from ..service import QueryStatus, ThemeService
from .document import TextDocumentView

TRIGGER_SUGGEST_COMMAND = "editor.action.triggerSuggest"


class ThemeLanguageFeatures:
    """Serves completion, hover and inlay hint records for open documents."""

    def __init__(self, service: ThemeService) -> None:
        self.logger = logging.getLogger("styled_theme.lsp.features")
        self.service = service

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def completion(
        self,
        document: TextDocumentView,
        position: Position,
        cancel: Optional[CancelToken] = None,
    ) -> CompletionList:
        offset = document.offset_at(position)
        result = self.service.complete_at(document.text, offset, cancel=cancel)
        if not result.ok:
            self._log_skipped("completion", result.status)
            return CompletionList(is_incomplete=False, items=[])
        items = [self._completion_item(suggestion, index) for index, suggestion in enumerate(result.value)]
        return CompletionList(is_incomplete=False, items=items)

    def _completion_item(self, suggestion: Suggestion, index: int) -> CompletionItem:
        if suggestion.is_intermediate:
            return CompletionItem(
                label=suggestion.segment,
                kind=CompletionItemKind.Module,
                detail="Theme Property",
                documentation=MarkupContent(
                    kind=MarkupKind.Markdown,
                    value=f"Full path: `{suggestion.full_path}` (Object)",
                ),
                insert_text=f"{suggestion.segment}.",
                sort_text=f"{index:05d}",
                command=Command(title="Re-trigger completions", command=TRIGGER_SUGGEST_COMMAND),
            )
        return CompletionItem(
            label=suggestion.segment,
            kind=CompletionItemKind.Property,
            detail="Theme Property",
            documentation=MarkupContent(
                kind=MarkupKind.Markdown,
                value=f"Value: `{format_value(suggestion.value)}`\n\nFull path: `{suggestion.full_path}`",
            ),
            insert_text=suggestion.segment,
            sort_text=f"{index:05d}",
        )

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def hover(self, document: TextDocumentView, position: Position) -> Optional[Hover]:
        offset = document.offset_at(position)
        result = self.service.hover(document.text, offset, document_name=document.uri)
        if not result.ok or result.value is None:
            self._log_skipped("hover", result.status)
            return None
        return Hover(
            contents=MarkupContent(kind=MarkupKind.Markdown, value=hover_markdown(result.value)),
            range=document.range_of(result.value.start, result.value.end),
        )

    # ------------------------------------------------------------------
    # Inlay hints
    # ------------------------------------------------------------------
    def inlay_hints(
        self,
        document: TextDocumentView,
        range_: Range,
        cancel: Optional[CancelToken] = None,
    ) -> List[InlayHint]:
        result = self.service.annotate(document.text, document.span_of(range_), cancel=cancel)
        if not result.ok:
            self._log_skipped("inlay hints", result.status)
            return []
        return [self._inlay_hint(document, annotation) for annotation in result.value]

    def _inlay_hint(self, document: TextDocumentView, annotation: InlayAnnotation) -> InlayHint:
        return InlayHint(
            position=document.position_at(annotation.offset),
            label=annotation.label,
            kind=InlayHintKind.Parameter,
            tooltip=MarkupContent(
                kind=MarkupKind.Markdown,
                value=f"Theme: `{annotation.path}: {format_value(annotation.value)}`",
            ),
            padding_left=True,
        )

    def _log_skipped(self, feature: str, status: QueryStatus) -> None:
        if status is QueryStatus.MISSING_TABLE:
            self.logger.debug("No theme snapshot published; %s skipped", feature)


def hover_markdown(result: HoverResult) -> str:
    lines = ["```typescript", f"{result.path}: {format_value(result.value)}", "```"]
    if result.is_inferred:
        root = result.path.split(".")[0]
        lines.append("")
        lines.append(f"*(Note: Assuming `{root}` is derived from theme)*")
    return "\n".join(lines)


__all__ = ["ThemeLanguageFeatures", "TRIGGER_SUGGEST_COMMAND", "hover_markdown"]
