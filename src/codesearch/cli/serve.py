"""codesearch serve command - MCP server over stdio."""

from pathlib import Path

import click

from codesearch.cli.utils import load_cli_config
from codesearch.mcp.server import run_server


@click.command()
@click.option(
    "--config-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory whose .codesearch/config.yaml to load (default: current directory)",
)
def serve_command(config_root: Path | None) -> None:
    """Run the MCP server on stdin/stdout.

    Exposes get_references and search_word. Logs go to stderr.
    """
    config = load_cli_config((config_root or Path.cwd()).resolve())
    run_server(config)
