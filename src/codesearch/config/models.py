"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODESEARCH__SECTION__KEY)
3. Project YAML (<root>/.codesearch/config.yaml)
4. Global YAML (~/.config/codesearch/config.yaml)
5. Built-in defaults (this file)

Examples:
    CODESEARCH__LOGGING__LEVEL=DEBUG
    CODESEARCH__SEARCH__MAX_RESULTS_DEFAULT=50
    CODESEARCH__LEXICAL__RG_PATH=/usr/local/bin/rg
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from codesearch.config.constants import (
    DEFAULT_EXTENSIONS,
    MAX_RESULTS_DEFAULT,
    MAX_RESULTS_LIMIT,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CODESEARCH__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every skipped file and tool call.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SearchConfig(BaseModel):
    """Structural reference search configuration.

    Env vars:
        CODESEARCH__SEARCH__MAX_RESULTS_DEFAULT: Default result cap
        CODESEARCH__SEARCH__EXTENSIONS: JSON list of file suffixes
    """

    max_results_default: int = Field(
        default=MAX_RESULTS_DEFAULT,
        description="Default global cap on references per search. "
        "TRADEOFF: Higher values increase response size.",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File suffixes searched. All are parsed with the TypeScript grammar.",
    )
    extra_excluded_dirs: list[str] = Field(
        default_factory=list,
        description="Directory names pruned in addition to the built-in list.",
    )
    included_dirs: list[str] = Field(
        default_factory=list,
        description="Built-in prunable directory names to search anyway (e.g. 'vendor').",
    )
    include_declarations: bool = Field(
        default=True,
        description="Search .d.ts declaration files too.",
    )

    @field_validator("max_results_default")
    @classmethod
    def validate_max_results(cls, v: int) -> int:
        if not (1 <= v <= MAX_RESULTS_LIMIT):
            raise ValueError(f"max_results_default must be 1-{MAX_RESULTS_LIMIT}, got {v}")
        return v

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("extensions must not be empty")
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Extension must look like '.ts', got {ext!r}")
        return v


class LexicalConfig(BaseModel):
    """Plain-text fallback search configuration.

    Env vars:
        CODESEARCH__LEXICAL__RG_PATH: ripgrep executable
        CODESEARCH__LEXICAL__TIMEOUT_SEC: Max runtime for one ripgrep call
    """

    rg_path: str = Field(default="rg", description="ripgrep executable name or path.")
    timeout_sec: float = Field(
        default=30.0,
        description="Kill ripgrep after this many seconds.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_sec must be positive, got {v}")
        return v


class CodeSearchConfig(BaseModel):
    """Root configuration for codesearch."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    lexical: LexicalConfig = Field(default_factory=LexicalConfig)
