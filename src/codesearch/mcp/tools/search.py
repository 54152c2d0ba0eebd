"""Search MCP tools - get_references and search_word."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field

from codesearch.config.constants import MAX_RESULTS_LIMIT
from codesearch.core.errors import CodeSearchError
from codesearch.core.progress import pluralize
from codesearch.mcp.errors import MCPError
from codesearch.mcp.registry import registry
from codesearch.mcp.tools.base import BaseParams
from codesearch.search.formatting import format_references, format_text_matches
from codesearch.search.lexical import search_word as run_word_search

if TYPE_CHECKING:
    from codesearch.mcp.context import AppContext

_CODEBASE_PATH_DESCRIPTION = (
    "ALWAYS PROVIDE THIS PATH: Path to the codebase directory provided to you "
    "by the environment information"
)


class GetReferencesParams(BaseParams):
    """Parameters for get_references."""

    symbol: str = Field(min_length=1, description="The symbol for which to get references")
    codebase_path: str = Field(min_length=1, description=_CODEBASE_PATH_DESCRIPTION)
    max_results: int | None = Field(
        default=None,
        ge=1,
        le=MAX_RESULTS_LIMIT,
        description="Maximum references to return across all files (server default if omitted)",
    )


class SearchWordParams(BaseParams):
    """Parameters for search_word."""

    word: str = Field(min_length=1, description="The word to search for in the codebase")
    codebase_path: str = Field(min_length=1, description=_CODEBASE_PATH_DESCRIPTION)
    max_results: int | None = Field(
        default=None,
        ge=1,
        le=MAX_RESULTS_LIMIT,
        description="Maximum matching lines to return (server default if omitted)",
    )


@registry.register(
    "get_references",
    "Get references to a symbol in the codebase using AST parsing for accurate results",
    GetReferencesParams,
)
async def get_references(ctx: AppContext, params: GetReferencesParams) -> dict[str, Any]:
    """Token-exact references to a symbol in TypeScript files."""
    root = Path(params.codebase_path).expanduser()
    limit = params.max_results or ctx.config.search.max_results_default
    try:
        result = ctx.search_ops.find_references(root, params.symbol, limit)
    except CodeSearchError as e:
        raise MCPError.from_error(e, path=params.codebase_path) from e

    return {
        **result.to_dict(),
        "text": format_references(params.symbol, params.codebase_path, result, limit),
        "summary": (
            f"{pluralize(result.total, 'reference')} in {pluralize(len(result.files), 'file')}"
            + (" (truncated)" if result.truncated else "")
        ),
    }


@registry.register(
    "search_word",
    "Search for a word in the codebase using ripgrep",
    SearchWordParams,
)
async def search_word(ctx: AppContext, params: SearchWordParams) -> dict[str, Any]:
    """Plain substring search; matches comments, strings and longer names too."""
    root = Path(params.codebase_path).expanduser()
    limit = params.max_results or ctx.config.search.max_results_default
    try:
        result = run_word_search(root, params.word, limit, config=ctx.config.lexical)
    except CodeSearchError as e:
        raise MCPError.from_error(e, path=params.codebase_path) from e

    return {
        **result.to_dict(),
        "text": format_text_matches(params.word, params.codebase_path, result, limit),
        "summary": (
            f"{pluralize(result.total, 'match', 'matches')} in {pluralize(len(result.files), 'file')}"
            + (" (truncated)" if result.truncated else "")
        ),
    }
