"""codesearch error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Parse
- 4xxx: Search
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Parse (3xxx)
    PARSE_INVALID_INPUT = 3001
    PARSE_READ_ERROR = 3002
    PARSE_DECODE_ERROR = 3003
    PARSE_QUERY_CONSTRUCTION = 3004

    # Search (4xxx)
    SEARCH_DISCOVERY_FAILED = 4001
    SEARCH_LEXICAL_FAILED = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class CodeSearchError(Exception):
    """Base error with structured context for CLI and MCP responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PARSE_READ_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/MCP responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CodeSearchError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ParseError(CodeSearchError):
    """A single source file could not be turned into a syntax tree.

    Batch traversal treats every subclass as "skip this file".
    """


class InvalidInputError(ParseError):
    """Empty or non-text input passed to the tree builder."""

    @classmethod
    def empty_source(cls) -> "InvalidInputError":
        return cls(
            code=ErrorCode.PARSE_INVALID_INPUT,
            message="Invalid source code provided: source is empty",
        )

    @classmethod
    def not_text(cls, value: Any) -> "InvalidInputError":
        type_name = type(value).__name__
        return cls(
            code=ErrorCode.PARSE_INVALID_INPUT,
            message=f"Invalid source code provided: expected text, got {type_name}",
            details={"type": type_name},
        )

    @classmethod
    def empty_symbol(cls) -> "InvalidInputError":
        return cls(
            code=ErrorCode.PARSE_INVALID_INPUT,
            message="Symbol must be a non-empty string",
        )

    @classmethod
    def bad_limit(cls, value: Any, reason: str) -> "InvalidInputError":
        return cls(
            code=ErrorCode.PARSE_INVALID_INPUT,
            message=f"Invalid max_results {value!r}: {reason}",
            details={"max_results": str(value), "reason": reason},
        )


class SourceReadError(ParseError):
    """File missing or unreadable."""

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "SourceReadError":
        reason = exc.strerror or str(exc)
        return cls(
            code=ErrorCode.PARSE_READ_ERROR,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class SourceDecodeError(ParseError):
    """File content is not valid UTF-8."""

    @classmethod
    def from_unicode_error(cls, path: str, exc: UnicodeDecodeError) -> "SourceDecodeError":
        return cls(
            code=ErrorCode.PARSE_DECODE_ERROR,
            message=f"Cannot decode {path} as UTF-8 (byte offset {exc.start})",
            details={"path": path, "offset": exc.start, "reason": exc.reason},
        )


class QueryConstructionError(CodeSearchError):
    """The fixed reference query failed to compile against the grammar.

    Raised at construction time only; indicates a grammar/query mismatch and
    is fatal to the process.
    """

    @classmethod
    def compile_failed(cls, query_text: str, reason: str) -> "QueryConstructionError":
        return cls(
            code=ErrorCode.PARSE_QUERY_CONSTRUCTION,
            message=f"Reference query failed to compile: {reason}",
            details={"query": query_text, "reason": reason},
        )


class SearchError(CodeSearchError):
    """Batch-level search failures."""


class DiscoveryError(SearchError):
    """Candidate files could not be enumerated."""

    @classmethod
    def not_a_directory(cls, path: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.SEARCH_DISCOVERY_FAILED,
            message=f"Not a directory: {path}",
            details={"path": path},
        )


class LexicalSearchError(SearchError):
    """The external text search tool failed."""

    @classmethod
    def tool_missing(cls, tool: str) -> "LexicalSearchError":
        return cls(
            code=ErrorCode.SEARCH_LEXICAL_FAILED,
            message=f"Failed to execute ripgrep: '{tool}' not found on PATH",
            details={"tool": tool},
        )

    @classmethod
    def tool_failed(cls, returncode: int, stderr: str) -> "LexicalSearchError":
        return cls(
            code=ErrorCode.SEARCH_LEXICAL_FAILED,
            message=f"Failed to execute ripgrep (exit {returncode}): {stderr.strip()}",
            details={"returncode": returncode, "stderr": stderr},
        )

    @classmethod
    def timed_out(cls, timeout_sec: float) -> "LexicalSearchError":
        return cls(
            code=ErrorCode.SEARCH_LEXICAL_FAILED,
            message=f"ripgrep timed out after {timeout_sec:g}s",
            retryable=True,
            details={"timeout_sec": timeout_sec},
        )


class InternalError(CodeSearchError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
