"""codesearch refs command - token-exact symbol references."""

from pathlib import Path

import click

from codesearch.cli.utils import echo_json, fail, load_cli_config
from codesearch.config.constants import MAX_RESULTS_LIMIT
from codesearch.core.errors import CodeSearchError
from codesearch.core.progress import pluralize, spinner, status
from codesearch.search import SearchOps, format_references


@click.command()
@click.argument("symbol")
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-n",
    "--max-results",
    type=click.IntRange(1, MAX_RESULTS_LIMIT),
    default=None,
    help="Maximum references to report (default from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def refs_command(symbol: str, path: Path, max_results: int | None, as_json: bool) -> None:
    """Find references to SYMBOL in the TypeScript files under PATH.

    PATH defaults to the current directory. Only whole identifiers, type
    names, property and method names match; comments and strings do not.
    """
    root = path.resolve()
    config = load_cli_config(root)
    limit = max_results or config.search.max_results_default

    try:
        ops = SearchOps(config.search)
        with spinner(f"Searching for {symbol}..."):
            result = ops.find_references(root, symbol, limit)
    except CodeSearchError as e:
        raise fail(e) from e

    if as_json:
        echo_json(result.to_dict())
    else:
        click.echo(format_references(symbol, str(path), result, limit))

    for skipped in result.skipped:
        status(f"Skipped {skipped.path}: {skipped.reason}", style="warning")
    if result.truncated:
        status(
            f"Stopped after {pluralize(result.total, 'reference')}; raise --max-results to see more",
            style="warning",
        )
