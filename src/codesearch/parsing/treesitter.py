"""Tree-sitter parsing for structural reference search.

This module provides:
- TreeBuilder: turns TypeScript source text into an immutable SyntaxTree
- Iterative traversal helpers (pre-order nodes, leaves in source order)
- format_tree: indented dump of node kinds, one per line

The grammar is bound once when the builder is created and shared by every
parse. Each ``build`` call uses a fresh ``tree_sitter.Parser`` so a builder
carries no per-call state and can be shared between workers.

Malformed syntax never raises: tree-sitter's error recovery yields ``ERROR``
and missing nodes, which are kept as ordinary nodes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tree_sitter
import tree_sitter_typescript

from codesearch.config.constants import SOURCE_ENCODING
from codesearch.core.errors import InvalidInputError, SourceDecodeError, SourceReadError

ERROR_NODE_TYPE = "ERROR"


@dataclass(frozen=True)
class SyntaxTree:
    """A parsed file: the tree-sitter tree plus the bytes it was built from."""

    tree: Any  # tree_sitter.Tree
    source: bytes
    error_count: int = 0
    path: str | None = None

    @property
    def root_node(self) -> Any:
        return self.tree.root_node

    @property
    def text(self) -> str:
        return self.source.decode(SOURCE_ENCODING)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def source_lines(self) -> list[bytes]:
        """Split the source on newlines; index ``row`` matches ``start_point[0]``."""
        return self.source.split(b"\n")


def typescript_language() -> tree_sitter.Language:
    """Load the TypeScript grammar (not TSX)."""
    return tree_sitter.Language(tree_sitter_typescript.language_typescript())


class TreeBuilder:
    """Build syntax trees for TypeScript source.

    Usage::

        builder = TreeBuilder()
        tree = builder.build("let x = 1;")
        tree = builder.build_from_path(Path("src/app.ts"))
    """

    def __init__(self, language: tree_sitter.Language | None = None) -> None:
        self._language = language if language is not None else typescript_language()

    @property
    def language(self) -> tree_sitter.Language:
        return self._language

    def build(self, source: str | bytes, *, path: str | None = None) -> SyntaxTree:
        """Parse source text into a SyntaxTree.

        ``bytes`` input must be UTF-8.

        Raises:
            InvalidInputError: source is not str/bytes, or is empty.
            SourceDecodeError: bytes input is not valid UTF-8.
        """
        if not isinstance(source, str | bytes):
            raise InvalidInputError.not_text(source)
        if not source:
            raise InvalidInputError.empty_source()

        if isinstance(source, bytes):
            data = source
            try:
                data.decode(SOURCE_ENCODING)
            except UnicodeDecodeError as e:
                raise SourceDecodeError.from_unicode_error(path or "<source>", e) from e
        else:
            data = source.encode(SOURCE_ENCODING)
        parser = tree_sitter.Parser(self._language)
        tree = parser.parse(data)
        return SyntaxTree(
            tree=tree,
            source=data,
            error_count=count_error_nodes(tree.root_node),
            path=path,
        )

    def build_from_path(self, path: Path | str) -> SyntaxTree:
        """Read a file as UTF-8 text and parse it.

        Raises:
            SourceReadError: file missing or unreadable.
            SourceDecodeError: content is not valid UTF-8.
            InvalidInputError: file is empty.
        """
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise SourceReadError.from_os_error(str(path), e) from e
        return self.build(data, path=str(path))


def iter_nodes(root: Any) -> Iterator[Any]:
    """Yield every node under ``root`` (inclusive) in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def iter_leaves(root: Any) -> Iterator[Any]:
    """Yield leaf nodes in source order."""
    for node in iter_nodes(root):
        if node.child_count == 0:
            yield node


def count_error_nodes(root: Any) -> int:
    return sum(1 for node in iter_nodes(root) if node.type == ERROR_NODE_TYPE or node.is_missing)


def format_tree(root: Any, indent: str = "  ") -> str:
    """Render node kinds one per line, indented by depth."""
    lines: list[str] = []
    stack: list[tuple[Any, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(f"{indent * depth}{node.type}")
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines)
