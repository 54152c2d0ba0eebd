"""codesearch grep command - plain word search via ripgrep."""

from pathlib import Path

import click

from codesearch.cli.utils import echo_json, fail, load_cli_config
from codesearch.config.constants import MAX_RESULTS_LIMIT
from codesearch.core.errors import CodeSearchError
from codesearch.core.progress import pluralize, status
from codesearch.search import format_text_matches, search_word


@click.command()
@click.argument("word")
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-n",
    "--max-results",
    type=click.IntRange(1, MAX_RESULTS_LIMIT),
    default=None,
    help="Maximum matching lines to report (default from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def grep_command(word: str, path: Path, max_results: int | None, as_json: bool) -> None:
    """Search for WORD in every file under PATH.

    Substring match: hits inside comments, strings and longer names are
    reported too. Requires ripgrep on PATH.
    """
    config = load_cli_config(path.resolve())
    limit = max_results or config.search.max_results_default

    try:
        result = search_word(path, word, limit, config=config.lexical)
    except CodeSearchError as e:
        raise fail(e) from e

    if as_json:
        echo_json(result.to_dict())
    else:
        click.echo(format_text_matches(word, str(path), result, limit))

    if result.truncated:
        status(f"Stopped after {pluralize(result.total, 'match', 'matches')}", style="warning")
