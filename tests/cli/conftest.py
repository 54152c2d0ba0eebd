"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the user's global config and CODESEARCH__ env vars out of CLI runs."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("CODESEARCH__"):
            monkeypatch.delenv(key)
    with patch("codesearch.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


@pytest.fixture
def ts_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    (repo / "src").mkdir(parents=True)
    (repo / "src" / "foo.ts").write_text("class Foo { bar() { return this.bar; } }\n")
    (repo / "src" / "use.ts").write_text("new Foo().bar();\n")
    return repo
