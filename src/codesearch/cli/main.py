"""codesearch CLI - codesearch command."""

import click

from codesearch import __version__
from codesearch.cli.grep import grep_command
from codesearch.cli.refs import refs_command
from codesearch.cli.serve import serve_command
from codesearch.cli.tree import tree_command
from codesearch.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="codesearch")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """codesearch - Token-exact symbol references for TypeScript codebases."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(refs_command, name="refs")
cli.add_command(grep_command, name="grep")
cli.add_command(tree_command, name="tree")
cli.add_command(serve_command, name="serve")


if __name__ == "__main__":
    cli()
