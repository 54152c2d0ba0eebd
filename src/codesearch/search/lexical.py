"""Plain-text fallback search backed by ripgrep.

Reports every line containing ``word`` as a literal substring, so it also
hits comments, strings and longer identifiers. Use the structural search when
token-exact results matter.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from codesearch.config.constants import MAX_RESULTS_DEFAULT, RG_NO_MATCH_EXIT_CODE
from codesearch.config.models import LexicalConfig
from codesearch.core.errors import InvalidInputError, LexicalSearchError
from codesearch.search.models import TextMatch, TextSearchResult

log = structlog.get_logger(__name__)


def build_rg_command(rg_path: str, word: str, directory: Path | str) -> list[str]:
    """Argument list for ripgrep; passed without a shell, so nothing is escaped."""
    return [
        rg_path,
        "--line-number",
        "--with-filename",
        "--no-heading",
        "--color",
        "never",
        "--fixed-strings",
        "--",
        word,
        str(directory),
    ]


def parse_rg_line(line: str) -> TextMatch | None:
    """Split ``path:line:text`` on its first two colons; None if malformed."""
    first = line.find(":")
    if first == -1:
        return None
    path, rest = line[:first], line[first + 1 :]
    second = rest.find(":")
    if second == -1:
        return None
    try:
        line_number = int(rest[:second])
    except ValueError:
        return None
    return TextMatch(path=path, line=line_number, text=rest[second + 1 :])


def parse_rg_output(stdout: str, max_results: int) -> TextSearchResult:
    """Group ripgrep output by file, capping the total at ``max_results``."""
    result = TextSearchResult()
    for raw in stdout.splitlines():
        if not raw:
            continue
        if result.total >= max_results:
            result.truncated = True
            break
        match = parse_rg_line(raw)
        if match is None:
            continue
        result.add(match)
    return result


def search_word(
    directory: Path | str,
    word: str,
    max_results: int = MAX_RESULTS_DEFAULT,
    config: LexicalConfig | None = None,
) -> TextSearchResult:
    """Find lines containing ``word`` under ``directory``.

    Raises:
        InvalidInputError: empty word.
        LexicalSearchError: ripgrep is missing, timed out or failed.
    """
    if not word:
        raise InvalidInputError.empty_symbol()
    config = config or LexicalConfig()
    cmd = build_rg_command(config.rg_path, word, directory)
    log.debug("lexical_search_executing", cmd=cmd)

    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=config.timeout_sec,
        )
    except FileNotFoundError as e:
        raise LexicalSearchError.tool_missing(config.rg_path) from e
    except subprocess.TimeoutExpired as e:
        raise LexicalSearchError.timed_out(config.timeout_sec) from e

    if proc.returncode == RG_NO_MATCH_EXIT_CODE:
        return TextSearchResult()
    if proc.returncode != 0:
        log.error("lexical_search_failed", returncode=proc.returncode, stderr=proc.stderr.strip())
        raise LexicalSearchError.tool_failed(proc.returncode, proc.stderr)

    result = parse_rg_output(proc.stdout, max_results)
    if result.truncated:
        log.warning("lexical_search_truncated", word=word, max_results=max_results)
    log.info("lexical_search_complete", word=word, matches=result.total, files=len(result.files))
    return result
