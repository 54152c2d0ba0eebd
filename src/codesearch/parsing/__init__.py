"""Tree-sitter parsing and structural reference matching."""

from codesearch.parsing.query import (
    CAPTURE_NAME,
    NAMEABLE_KINDS,
    REFERENCE_QUERY_TEXT,
    NodeKind,
    ReferenceMatcher,
    build_query_text,
)
from codesearch.parsing.treesitter import (
    SyntaxTree,
    TreeBuilder,
    format_tree,
    iter_leaves,
    iter_nodes,
    typescript_language,
)

__all__ = [
    "CAPTURE_NAME",
    "NAMEABLE_KINDS",
    "REFERENCE_QUERY_TEXT",
    "NodeKind",
    "ReferenceMatcher",
    "SyntaxTree",
    "TreeBuilder",
    "build_query_text",
    "format_tree",
    "iter_leaves",
    "iter_nodes",
    "typescript_language",
]
