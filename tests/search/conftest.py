"""Shared fixtures for search tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from codesearch.search.ops import SearchOps


@pytest.fixture(scope="module")
def ops() -> SearchOps:
    return SearchOps()


@pytest.fixture
def write_ts(tmp_path: Path):
    """Write a TypeScript file under tmp_path and return its path."""

    def _write(relpath: str, content: str | bytes) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
