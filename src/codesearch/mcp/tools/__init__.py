"""MCP tool handlers."""

from codesearch.mcp.tools import search

__all__ = ["search"]
