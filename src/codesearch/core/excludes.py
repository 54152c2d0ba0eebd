"""Directory exclude lists with tiered architecture.

Tier 0 (HARDCODED_DIRS): Never traversed, not user-configurable.
    - VCS internals, codesearch's own data directory

Tier 1 (DEFAULT_PRUNABLE_DIRS): Excluded by default, user can opt back in
    via ``search.included_dirs`` in config.
    - Dependency-manager output, caches, build outputs
"""

from __future__ import annotations

from collections.abc import Iterable

# =============================================================================
# Tier 0: HARDCODED - Never traverse, not user-configurable
# =============================================================================

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # codesearch data
        ".codesearch",
    )
)

# =============================================================================
# Tier 1: DEFAULT_PRUNABLE - Excluded by default, user can override
# =============================================================================

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # -------------------------------------------------------------------------
        # JavaScript/TypeScript package managers and frameworks
        # -------------------------------------------------------------------------
        "node_modules",
        ".npm",
        ".yarn",
        ".pnpm-store",
        "bower_components",
        "jspm_packages",
        ".next",  # Next.js build
        ".nuxt",  # Nuxt.js build
        ".svelte-kit",
        ".angular",
        ".turbo",  # Turborepo cache
        ".parcel-cache",
        # -------------------------------------------------------------------------
        # Python tooling that commonly sits beside a frontend
        # -------------------------------------------------------------------------
        "venv",
        ".venv",
        "__pycache__",
        # -------------------------------------------------------------------------
        # Generic build/output directories
        # -------------------------------------------------------------------------
        "dist",
        "build",
        "out",
        "coverage",
        ".nyc_output",
        # -------------------------------------------------------------------------
        # IDE/Editor directories
        # -------------------------------------------------------------------------
        ".idea",
        ".vscode",
        # -------------------------------------------------------------------------
        # Misc caches
        # -------------------------------------------------------------------------
        ".cache",
        "vendor",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def is_hardcoded_dir(dirname: str) -> bool:
    """Check if directory is hardcoded (never traversable, not overridable)."""
    return dirname in HARDCODED_DIRS


def is_default_prunable(dirname: str) -> bool:
    """Check if directory is prunable by default (but user can override)."""
    return dirname in DEFAULT_PRUNABLE_DIRS


def build_excluded_dirs(
    extra: Iterable[str] = (),
    included: Iterable[str] = (),
) -> frozenset[str]:
    """Combine the default tiers with user additions and opt-ins.

    Opt-ins only lift Tier 1 entries; Tier 0 always stays excluded.
    """
    lifted = {d for d in included if not is_hardcoded_dir(d)}
    return (PRUNABLE_DIRS - lifted) | frozenset(extra)


__all__ = [
    "HARDCODED_DIRS",
    "DEFAULT_PRUNABLE_DIRS",
    "PRUNABLE_DIRS",
    "build_excluded_dirs",
    "is_hardcoded_dir",
    "is_default_prunable",
]
