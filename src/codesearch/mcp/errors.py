"""Structured error system for MCP tools.

Tool handlers translate codesearch errors into MCPError so agents get a
machine-readable code plus a remediation hint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from fastmcp.exceptions import ToolError

from codesearch.core.errors import (
    CodeSearchError,
    DiscoveryError,
    InvalidInputError,
    LexicalSearchError,
    ParseError,
)


class MCPErrorCode(StrEnum):
    """Machine-readable error codes for MCP tool failures."""

    # Validation errors - agent should fix input
    INVALID_PARAMS = "INVALID_PARAMS"

    # File errors
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"

    # Search errors
    SEARCH_FAILED = "SEARCH_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


_REMEDIATIONS: dict[MCPErrorCode, str] = {
    MCPErrorCode.INVALID_PARAMS: "Pass a non-empty symbol and a max_results between 1 and the allowed limit.",
    MCPErrorCode.FILE_NOT_FOUND: "Pass the absolute path of an existing codebase directory.",
    MCPErrorCode.PARSE_ERROR: "Check that the file is UTF-8 TypeScript source.",
    MCPErrorCode.SEARCH_FAILED: "Install ripgrep (rg) or fall back to get_references.",
    MCPErrorCode.INTERNAL_ERROR: "Retry; if it persists, check the server log.",
}


@dataclass
class ErrorResponse:
    """Structured error response for MCP tools."""

    code: MCPErrorCode
    message: str
    remediation: str
    path: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "remediation": self.remediation,
            "path": self.path,
            "context": self.context,
        }


class MCPError(ToolError):
    """Base exception for MCP tool errors with structured response.

    Extends FastMCP's ToolError so FastMCP passes it through unwrapped.
    """

    def __init__(
        self,
        code: MCPErrorCode,
        message: str,
        remediation: str,
        path: str | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.remediation = remediation
        self.path = path
        self.context = context

    def to_response(self) -> ErrorResponse:
        """Convert to ErrorResponse."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            remediation=self.remediation,
            path=self.path,
            context=self.context,
        )

    @classmethod
    def from_error(cls, error: CodeSearchError, path: str | None = None) -> MCPError:
        """Map a codesearch error onto the MCP code agents act on."""
        code = _classify(error)
        details = dict(error.details)
        detail_path = details.pop("path", None)
        return cls(
            code=code,
            message=error.message,
            remediation=_REMEDIATIONS[code],
            path=path or detail_path,
            error=error.error_name,
            **details,
        )


def _classify(error: CodeSearchError) -> MCPErrorCode:
    if isinstance(error, InvalidInputError):
        return MCPErrorCode.INVALID_PARAMS
    if isinstance(error, DiscoveryError):
        return MCPErrorCode.FILE_NOT_FOUND
    if isinstance(error, ParseError):
        return MCPErrorCode.PARSE_ERROR
    if isinstance(error, LexicalSearchError):
        return MCPErrorCode.SEARCH_FAILED
    return MCPErrorCode.INTERNAL_ERROR
