"""codesearch tree command - dump a file's syntax tree."""

from pathlib import Path

import click

from codesearch.cli.utils import fail
from codesearch.core.errors import CodeSearchError
from codesearch.core.progress import pluralize, status
from codesearch.parsing import TreeBuilder, format_tree


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def tree_command(file: Path) -> None:
    """Print the syntax tree of a TypeScript FILE."""
    try:
        tree = TreeBuilder().build_from_path(file)
    except CodeSearchError as e:
        raise fail(e) from e

    click.echo(format_tree(tree.root_node))
    if tree.has_errors:
        status(f"{file}: {pluralize(tree.error_count, 'syntax error')}", style="warning")
