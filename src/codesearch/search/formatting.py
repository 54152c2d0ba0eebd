"""Human-readable rendering of search results."""

from __future__ import annotations

from codesearch.search.models import SearchResult, TextSearchResult


def truncation_warning(max_results: int) -> str:
    return (
        f"Warning: search limited to {max_results} results. "
        "Use more specific search terms for complete results."
    )


def format_references(
    symbol: str,
    root: str,
    result: SearchResult,
    max_results: int | None = None,
) -> str:
    """Render references grouped by file.

    Example::

        References for "bar" in /repo:

        File: /repo/src/a.ts
          Line 1, Column 13: class Foo { bar() { return this.bar; } }

    A warning line is appended when the result was capped and
    ``max_results`` is given.
    """
    if result.is_empty:
        return f'No references found for "{symbol}" in {root}.'

    parts = [f'References for "{symbol}" in {root}:\n']
    for path, refs in result.files.items():
        parts.append(f"File: {path}")
        parts.extend(f"  Line {ref.line}, Column {ref.column}: {ref.text}" for ref in refs)
        parts.append("")
    if result.truncated and max_results is not None:
        parts.append(truncation_warning(max_results))
    return "\n".join(parts)


def format_text_matches(
    word: str,
    root: str,
    result: TextSearchResult,
    max_results: int | None = None,
) -> str:
    if result.is_empty:
        return f'No matches found for "{word}" in {root}.'

    parts = [f'Matches for "{word}" in {root}:\n']
    for path, matches in result.files.items():
        parts.append(f"File: {path}")
        parts.extend(f"  Line {m.line}: {m.text}" for m in matches)
        parts.append("")
    if result.truncated and max_results is not None:
        parts.append(truncation_warning(max_results))
    return "\n".join(parts)
