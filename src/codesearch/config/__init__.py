"""Config module exports."""

from codesearch.config.loader import load_config
from codesearch.config.models import (
    CodeSearchConfig,
    LexicalConfig,
    LoggingConfig,
    LogOutputConfig,
    SearchConfig,
)

__all__ = [
    "load_config",
    "CodeSearchConfig",
    "LexicalConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "SearchConfig",
]
