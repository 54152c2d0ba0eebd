"""Tests for the MCP tool registry."""

from __future__ import annotations

from typing import Any

from codesearch.mcp.registry import ToolRegistry
from codesearch.mcp.tools.base import BaseParams


class EchoParams(BaseParams):
    text: str


class TestToolRegistry:
    def test_singleton(self) -> None:
        assert ToolRegistry() is ToolRegistry()

    def test_register_and_get(self, clean_registry: ToolRegistry) -> None:
        @clean_registry.register("echo", "Echo text back", EchoParams)
        async def echo(ctx: Any, params: EchoParams) -> dict[str, Any]:  # noqa: ARG001
            return {"text": params.text}

        spec = clean_registry.get("echo")

        assert spec is not None
        assert spec.handler is echo
        assert spec.description == "Echo text back"
        assert spec.params_model is EchoParams

    def test_get_all_in_registration_order(self, clean_registry: ToolRegistry) -> None:
        for name in ("b", "a"):
            clean_registry.register(name, name, EchoParams)(lambda ctx, params: None)  # type: ignore[arg-type,return-value]

        assert [spec.name for spec in clean_registry.get_all()] == ["b", "a"]

    def test_get_unknown(self, clean_registry: ToolRegistry) -> None:
        assert clean_registry.get("nope") is None

    def test_clear(self, clean_registry: ToolRegistry) -> None:
        clean_registry.register("x", "x", EchoParams)(lambda ctx, params: None)  # type: ignore[arg-type,return-value]
        clean_registry.clear()
        assert clean_registry.get_all() == []

    def test_search_tools_registered(self) -> None:
        import codesearch.mcp.tools  # noqa: F401
        from codesearch.mcp.registry import registry

        assert registry.get("get_references") is not None
        assert registry.get("search_word") is not None
