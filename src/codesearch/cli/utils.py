"""CLI utilities."""

import json
from pathlib import Path
from typing import Any

import click

from codesearch.config import CodeSearchConfig, load_config
from codesearch.core.errors import CodeSearchError


def load_cli_config(root: Path) -> CodeSearchConfig:
    """Load configuration for ``root``, turning config errors into click errors."""
    try:
        return load_config(root)
    except CodeSearchError as e:
        raise click.ClickException(str(e)) from e


def fail(error: CodeSearchError) -> click.ClickException:
    """Wrap a domain error for click to print and exit with status 1."""
    return click.ClickException(error.message)


def echo_json(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, indent=2))
