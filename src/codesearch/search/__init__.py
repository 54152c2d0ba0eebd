"""Reference search: discovery, batch traversal, plain-text fallback."""

from codesearch.search.discovery import discover_files
from codesearch.search.formatting import format_references, format_text_matches
from codesearch.search.lexical import search_word
from codesearch.search.models import (
    Reference,
    SearchResult,
    SkippedFile,
    TextMatch,
    TextSearchResult,
)
from codesearch.search.ops import SearchOps

__all__ = [
    "Reference",
    "SearchOps",
    "SearchResult",
    "SkippedFile",
    "TextMatch",
    "TextSearchResult",
    "discover_files",
    "format_references",
    "format_text_matches",
    "search_word",
]
