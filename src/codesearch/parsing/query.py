"""Structural reference matching.

A single tree-sitter query selects every "nameable" node kind in one pass;
captured nodes are then kept only when their text equals the requested
symbol byte for byte.

``member_expression`` is part of the nameable set, so a symbol such as
``this.bar`` matches the whole member-access expression. A bare ``bar``
still matches the ``property_identifier`` inside it.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

import tree_sitter
from tree_sitter import Query as _TSQuery
from tree_sitter import QueryCursor as _TSQueryCursor

from codesearch.core.errors import InvalidInputError, QueryConstructionError

CAPTURE_NAME = "ref"


class NodeKind(StrEnum):
    """Node kinds that can carry a symbol name."""

    IDENTIFIER = "identifier"
    TYPE_IDENTIFIER = "type_identifier"
    PROPERTY_IDENTIFIER = "property_identifier"
    METHOD_DEFINITION = "method_definition"
    PROPERTY_SIGNATURE = "property_signature"
    MEMBER_EXPRESSION = "member_expression"


NAMEABLE_KINDS: tuple[NodeKind, ...] = tuple(NodeKind)


def build_query_text(kinds: Iterable[NodeKind], capture: str = CAPTURE_NAME) -> str:
    """Build an alternation pattern capturing every kind under one name."""
    alternatives = "\n".join(f"  ({kind.value})" for kind in kinds)
    return f"[\n{alternatives}\n] @{capture}"


REFERENCE_QUERY_TEXT = build_query_text(NAMEABLE_KINDS)


class ReferenceMatcher:
    """Find nodes whose text is exactly a given symbol.

    The query is compiled once against ``language`` and reused; each call
    gets its own cursor, so one matcher can serve many trees.
    """

    def __init__(self, language: tree_sitter.Language, query_text: str = REFERENCE_QUERY_TEXT) -> None:
        try:
            self._query = _TSQuery(language, query_text)
        except tree_sitter.QueryError as e:
            raise QueryConstructionError.compile_failed(query_text, str(e)) from e
        self._query_text = query_text

    @property
    def query_text(self) -> str:
        return self._query_text

    def find_references(self, root: Any, symbol: str) -> list[Any]:
        """Return captured nodes whose text equals ``symbol``, in match order.

        Comparison is exact: no trimming, normalization, or case folding.
        """
        if not isinstance(symbol, str) or not symbol:
            raise InvalidInputError.empty_symbol()

        target = symbol.encode("utf-8")
        cursor = _TSQueryCursor(self._query)
        matches: list[tuple[int, dict[str, list[Any]]]] = cursor.matches(root)

        references: list[Any] = []
        for _pattern_idx, captures in matches:
            for node in captures.get(CAPTURE_NAME, []):
                if node.text == target:
                    references.append(node)
        return references
