"""Core module exports."""

from codesearch.core.errors import (
    CodeSearchError,
    ConfigError,
    DiscoveryError,
    ErrorCode,
    InternalError,
    InvalidInputError,
    LexicalSearchError,
    ParseError,
    QueryConstructionError,
    SearchError,
    SourceDecodeError,
    SourceReadError,
)
from codesearch.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)
from codesearch.core.progress import spinner, status

__all__ = [
    # Errors
    "CodeSearchError",
    "ConfigError",
    "DiscoveryError",
    "ErrorCode",
    "InternalError",
    "InvalidInputError",
    "LexicalSearchError",
    "ParseError",
    "QueryConstructionError",
    "SearchError",
    "SourceDecodeError",
    "SourceReadError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
    # Progress
    "spinner",
    "status",
]
