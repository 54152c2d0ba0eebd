"""Tests for the ripgrep-backed word search.

subprocess.run is mocked; no ripgrep binary is needed.
"""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from codesearch.config.models import LexicalConfig
from codesearch.core.errors import InvalidInputError, LexicalSearchError
from codesearch.search.lexical import (
    build_rg_command,
    parse_rg_line,
    parse_rg_output,
    search_word,
)
from codesearch.search.models import TextMatch

RG_OUTPUT = (
    "src/a.ts:1:// foo helper\n"
    "src/a.ts:3:const foobar = foo();\n"
    "src/b.ts:7:  return {foo: 1};\n"
)


@pytest.fixture
def mock_run() -> Iterator[MagicMock]:
    with patch("codesearch.search.lexical.subprocess.run") as run:
        yield run


def _completed(returncode: int, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["rg"], returncode=returncode, stdout=stdout, stderr=stderr)


class TestBuildCommand:
    def test_literal_search_with_line_numbers(self) -> None:
        cmd = build_rg_command("rg", "foo", "/repo")

        assert cmd[0] == "rg"
        assert "--line-number" in cmd
        assert "--fixed-strings" in cmd
        assert cmd[-3:] == ["--", "foo", "/repo"]

    def test_word_starting_with_dash_is_not_a_flag(self) -> None:
        cmd = build_rg_command("rg", "-v", "/repo")
        assert cmd.index("--") < cmd.index("-v")


class TestParseRgLine:
    def test_splits_on_first_two_colons(self) -> None:
        assert parse_rg_line("a.ts:3:const x = {a: 1};") == TextMatch("a.ts", 3, "const x = {a: 1};")

    def test_keeps_untrimmed_text(self) -> None:
        assert parse_rg_line("a.ts:2:    foo();").text == "    foo();"

    @pytest.mark.parametrize("line", ["no colons", "a.ts:notanumber:text", "a.ts:12"])
    def test_malformed(self, line: str) -> None:
        assert parse_rg_line(line) is None


class TestParseRgOutput:
    def test_groups_by_file(self) -> None:
        result = parse_rg_output(RG_OUTPUT, max_results=10)

        assert list(result.files) == ["src/a.ts", "src/b.ts"]
        assert result.total == 3
        assert not result.truncated

    def test_cap(self) -> None:
        result = parse_rg_output(RG_OUTPUT, max_results=2)

        assert result.total == 2
        assert result.truncated
        assert list(result.files) == ["src/a.ts"]

    def test_exact_fit_not_truncated(self) -> None:
        assert not parse_rg_output(RG_OUTPUT, max_results=3).truncated

    def test_blank_and_malformed_lines_skipped(self) -> None:
        result = parse_rg_output("\nbinary file matches\nsrc/a.ts:1:foo\n", max_results=10)
        assert result.total == 1


class TestSearchWord:
    def test_returns_matches(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0, RG_OUTPUT)

        result = search_word("/repo", "foo", max_results=10)

        assert result.total == 3
        cmd = mock_run.call_args.args[0]
        assert cmd[-2:] == ["foo", "/repo"]
        assert mock_run.call_args.kwargs["timeout"] == LexicalConfig().timeout_sec

    def test_uses_configured_binary(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(1)

        search_word("/repo", "foo", config=LexicalConfig(rg_path="/opt/rg", timeout_sec=5))

        assert mock_run.call_args.args[0][0] == "/opt/rg"
        assert mock_run.call_args.kwargs["timeout"] == 5

    def test_no_matches(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(1)

        result = search_word("/repo", "foo")

        assert result.is_empty
        assert not result.truncated

    def test_rg_failure(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(2, stderr="rg: /repo: No such file or directory\n")

        with pytest.raises(LexicalSearchError) as exc_info:
            search_word("/repo", "foo")
        assert exc_info.value.details["returncode"] == 2

    def test_rg_missing(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = FileNotFoundError(2, "No such file", "rg")

        with pytest.raises(LexicalSearchError) as exc_info:
            search_word("/repo", "foo")
        assert "not found" in exc_info.value.message

    def test_timeout_is_retryable(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="rg", timeout=30)

        with pytest.raises(LexicalSearchError) as exc_info:
            search_word("/repo", "foo")
        assert exc_info.value.retryable

    def test_empty_word(self, mock_run: MagicMock) -> None:
        with pytest.raises(InvalidInputError):
            search_word("/repo", "")
        mock_run.assert_not_called()
