"""Language Server Protocol presentation of theme query results."""

from .document import TextDocumentView
from .features import ThemeLanguageFeatures, hover_markdown

__all__ = [
    "TextDocumentView",
    "ThemeLanguageFeatures",
    "hover_markdown",
]
