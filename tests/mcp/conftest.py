"""Shared fixtures for MCP tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from codesearch.config.models import CodeSearchConfig
from codesearch.mcp.context import AppContext
from codesearch.mcp.registry import ToolRegistry, registry


@pytest.fixture
def clean_registry() -> Generator[ToolRegistry, None, None]:
    """Clear and yield the global registry, restore after test."""
    original_tools = dict(registry._tools)
    registry.clear()
    yield registry
    registry._tools = original_tools


@pytest.fixture(scope="module")
def app_context() -> AppContext:
    return AppContext.create(CodeSearchConfig())


@pytest.fixture
def ts_repo(tmp_path: Path) -> Path:
    """Small TypeScript codebase with references to ``bar``."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "foo.ts").write_text("class Foo { bar() { return this.bar; } }\n")
    (tmp_path / "src" / "use.ts").write_text("// bar\nnew Foo().bar();\n")
    (tmp_path / "src" / "bad.ts").write_bytes(b"const x = '\xff';\n")
    return tmp_path
