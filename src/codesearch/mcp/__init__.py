"""MCP server module - FastMCP tool registration and wiring."""

from codesearch.mcp.context import AppContext
from codesearch.mcp.registry import ToolRegistry, ToolSpec
from codesearch.mcp.server import create_mcp_server, run_server

__all__ = ["AppContext", "ToolRegistry", "ToolSpec", "create_mcp_server", "run_server"]
