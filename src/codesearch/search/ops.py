"""Structural reference search over many files.

SearchOps owns one TreeBuilder and one ReferenceMatcher, both built once and
read-only afterwards. Each file is parsed and matched on its own; nothing is
shared between files except the running result count.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from codesearch.config.constants import MAX_RESULTS_LIMIT, SOURCE_ENCODING
from codesearch.config.models import SearchConfig
from codesearch.core.errors import InvalidInputError, ParseError
from codesearch.core.excludes import build_excluded_dirs
from codesearch.parsing.query import ReferenceMatcher
from codesearch.parsing.treesitter import TreeBuilder
from codesearch.search.discovery import discover_files
from codesearch.search.models import Reference, SearchResult, SkippedFile

log = structlog.get_logger(__name__)


def resolve_max_results(max_results: int | None, default: int) -> int:
    """Apply the default cap and validate a caller-supplied one."""
    if max_results is None:
        return default
    if isinstance(max_results, bool) or not isinstance(max_results, int):
        raise InvalidInputError.bad_limit(max_results, "must be an integer")
    if max_results < 1:
        raise InvalidInputError.bad_limit(max_results, "must be at least 1")
    if max_results > MAX_RESULTS_LIMIT:
        raise InvalidInputError.bad_limit(max_results, f"must be at most {MAX_RESULTS_LIMIT}")
    return max_results


def node_to_reference(path: str, node: Any, lines: list[bytes]) -> Reference:
    """Convert a node's 0-based (row, byte column) to a 1-based Reference."""
    row, byte_col = node.start_point
    line_bytes = lines[row] if row < len(lines) else b""
    column = len(line_bytes[:byte_col].decode(SOURCE_ENCODING)) + 1
    return Reference(
        path=path,
        line=row + 1,
        column=column,
        text=line_bytes.decode(SOURCE_ENCODING).strip(),
    )


class SearchOps:
    """Token-exact symbol reference search."""

    def __init__(
        self,
        config: SearchConfig | None = None,
        builder: TreeBuilder | None = None,
        matcher: ReferenceMatcher | None = None,
    ) -> None:
        self._config = config or SearchConfig()
        self._builder = builder or TreeBuilder()
        self._matcher = matcher or ReferenceMatcher(self._builder.language)

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def builder(self) -> TreeBuilder:
        return self._builder

    @property
    def matcher(self) -> ReferenceMatcher:
        return self._matcher

    def discover(self, root: Path | str) -> list[Path]:
        """List candidate files under ``root`` using configured suffixes and excludes."""
        excluded = build_excluded_dirs(
            extra=self._config.extra_excluded_dirs,
            included=self._config.included_dirs,
        )
        return discover_files(
            root,
            extensions=self._config.extensions,
            exclude_dirs=excluded,
            include_declarations=self._config.include_declarations,
        )

    def search_symbol(
        self,
        files: Iterable[Path | str],
        symbol: str,
        max_results: int | None = None,
    ) -> SearchResult:
        """Collect references to ``symbol`` across ``files`` in the given order.

        Stops as soon as ``max_results`` references have been collected and
        more work remains, setting ``truncated``. Files that fail to read,
        decode or parse are logged, recorded in ``skipped`` and do not count
        toward the cap.

        Raises:
            InvalidInputError: empty symbol or invalid cap.
        """
        if not isinstance(symbol, str) or not symbol:
            raise InvalidInputError.empty_symbol()
        limit = resolve_max_results(max_results, self._config.max_results_default)

        result = SearchResult()
        for file in files:
            if result.total >= limit:
                result.truncated = True
                break

            path = str(file)
            result.files_scanned += 1
            try:
                tree = self._builder.build_from_path(file)
            except ParseError as e:
                log.warning("file_parse_failed", path=path, error=e.error_name, reason=e.message)
                result.skipped.append(SkippedFile(path=path, error=e.error_name, reason=e.message))
                continue

            nodes = self._matcher.find_references(tree.root_node, symbol)
            if not nodes:
                continue

            lines = tree.source_lines()
            for node in nodes:
                if result.total >= limit:
                    result.truncated = True
                    break
                result.add(node_to_reference(path, node, lines))

            if result.truncated:
                break

        if result.truncated:
            log.warning("symbol_search_truncated", symbol=symbol, max_results=limit)
        log.info(
            "symbol_search_complete",
            symbol=symbol,
            files_scanned=result.files_scanned,
            files_matched=len(result.files),
            references=result.total,
            skipped=len(result.skipped),
            truncated=result.truncated,
        )
        return result

    def find_references(
        self,
        root: Path | str,
        symbol: str,
        max_results: int | None = None,
    ) -> SearchResult:
        """Discover files under ``root`` and search them for ``symbol``.

        Raises:
            DiscoveryError: ``root`` is not a directory.
            InvalidInputError: empty symbol or invalid cap.
        """
        if not isinstance(symbol, str) or not symbol:
            raise InvalidInputError.empty_symbol()
        files = self.discover(root)
        return self.search_symbol(files, symbol, max_results)
