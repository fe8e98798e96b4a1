"""Highlight processor: renders a stored source file as syntax-highlighted HTML."""

from .engine import HighlightEngine, highlight_to_html
from .languages import AUTO_LANGUAGE, HLJS_TO_PYGMENTS, resolve_lexer
from .models import HighlightJobDescriptor

__all__ = [
    "AUTO_LANGUAGE",
    "HLJS_TO_PYGMENTS",
    "HighlightEngine",
    "HighlightJobDescriptor",
    "highlight_to_html",
    "resolve_lexer",
]
