"""Tests for result text rendering."""

from codesearch.search.formatting import (
    format_references,
    format_text_matches,
    truncation_warning,
)
from codesearch.search.models import (
    Reference,
    SearchResult,
    TextMatch,
    TextSearchResult,
)

LINE = "class Foo { bar() { return this.bar; } }"


def _result(*refs: Reference, truncated: bool = False) -> SearchResult:
    result = SearchResult(truncated=truncated)
    for ref in refs:
        result.add(ref)
    return result


class TestFormatReferences:
    def test_no_results(self) -> None:
        text = format_references("bar", "/repo", SearchResult())
        assert text == 'No references found for "bar" in /repo.'

    def test_grouped_by_file(self) -> None:
        result = _result(
            Reference("/repo/a.ts", 1, 13, LINE),
            Reference("/repo/a.ts", 1, 33, LINE),
            Reference("/repo/b.ts", 4, 5, "x.bar();"),
        )

        text = format_references("bar", "/repo", result)

        assert text == (
            'References for "bar" in /repo:\n'
            "\n"
            "File: /repo/a.ts\n"
            f"  Line 1, Column 13: {LINE}\n"
            f"  Line 1, Column 33: {LINE}\n"
            "\n"
            "File: /repo/b.ts\n"
            "  Line 4, Column 5: x.bar();\n"
        )

    def test_truncation_warning_appended(self) -> None:
        result = _result(Reference("/repo/a.ts", 1, 13, LINE), truncated=True)

        text = format_references("bar", "/repo", result, max_results=1)

        assert text.endswith(truncation_warning(1))

    def test_no_warning_without_max_results(self) -> None:
        result = _result(Reference("/repo/a.ts", 1, 13, LINE), truncated=True)

        assert "Warning" not in format_references("bar", "/repo", result)

    def test_warning_text(self) -> None:
        assert truncation_warning(10) == (
            "Warning: search limited to 10 results. "
            "Use more specific search terms for complete results."
        )


class TestFormatTextMatches:
    def test_no_results(self) -> None:
        text = format_text_matches("foo", "/repo", TextSearchResult())
        assert text == 'No matches found for "foo" in /repo.'

    def test_matches(self) -> None:
        result = TextSearchResult()
        result.add(TextMatch("a.ts", 3, "const foobar = 1;"))

        text = format_text_matches("foo", "/repo", result)

        assert text == 'Matches for "foo" in /repo:\n\nFile: a.ts\n  Line 3: const foobar = 1;\n'
