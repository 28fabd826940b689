"""
Theme path IntelliSense for styled-components.

The package turns a nested design-token theme (palette, typography,
spacing and so on) into a flat table of dotted paths and answers three
editor questions against source text:

* ``completion`` – which path segment can follow what has been typed
  after ``theme.``, ``props.theme.`` or an arrow-function accessor.
* ``hover`` – what value the accessor under the cursor resolves to.
* ``inlay`` – a ``= value`` annotation after every accessor in a range.

``snapshot`` holds the published table; ``service`` reads one snapshot
per query; ``lsp`` renders results as Language Server Protocol records.
Building the theme itself and loading it from disk are left to the host.
"""

from .cancellation import CancellationToken
from .completion import Suggestion, complete, complete_at
from .config import DEFAULT_SETTINGS, EngineSettings, load_settings
from .errors import MalformedTreeError, ThemeConfigError, ThemeError
from .flatten import flatten
from .hover import Confidence, HoverResult, hover
from .inlay import InlayAnnotation, annotate
from .matcher import AccessExpression, AccessKind, PointMatch, match_at, match_range
from .service import QueryResult, QueryStatus, ThemeService
from .snapshot import ThemeSnapshot, ThemeTableProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AccessExpression",
    "AccessKind",
    "CancellationToken",
    "Confidence",
    "DEFAULT_SETTINGS",
    "EngineSettings",
    "HoverResult",
    "InlayAnnotation",
    "MalformedTreeError",
    "PointMatch",
    "QueryResult",
    "QueryStatus",
    "Suggestion",
    "ThemeConfigError",
    "ThemeError",
    "ThemeService",
    "ThemeSnapshot",
    "ThemeTableProvider",
    "annotate",
    "complete",
    "complete_at",
    "flatten",
    "hover",
    "load_settings",
    "match_at",
    "match_range",
]
