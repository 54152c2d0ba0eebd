"""Configuration constants.

Values here are NOT user-configurable: hard caps and protocol constraints.
For configurable defaults, see models.py (SearchConfig, LexicalConfig).
"""

# =============================================================================
# Result caps
# =============================================================================
# Users can configure defaults below these, but cannot exceed them.

MAX_RESULTS_DEFAULT = 10
"""Default cap on references/matches returned by one search."""

MAX_RESULTS_LIMIT = 1000
"""Maximum cap a caller may request."""

# =============================================================================
# Source handling
# =============================================================================

SOURCE_ENCODING = "utf-8"
"""Encoding used to decode source files. Decoding is strict."""

DEFAULT_EXTENSIONS: tuple[str, ...] = (".ts",)
"""File suffixes handed to the TypeScript grammar."""

DECLARATION_SUFFIX = ".d.ts"
"""Ambient declaration files; matched by ".ts", optionally skipped."""

# =============================================================================
# Lexical search
# =============================================================================

RG_NO_MATCH_EXIT_CODE = 1
"""ripgrep exit status meaning "ran fine, nothing matched"."""
