"""Candidate file discovery.

Walks a directory tree, pruning dependency and build directories, and
returns files whose names end with one of the searched suffixes. Directories
and files are visited in sorted order so the list is stable across runs;
batch truncation depends on that order.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

import structlog

from codesearch.config.constants import DECLARATION_SUFFIX, DEFAULT_EXTENSIONS
from codesearch.core.errors import DiscoveryError
from codesearch.core.excludes import PRUNABLE_DIRS

log = structlog.get_logger(__name__)


def discover_files(
    root: Path | str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude_dirs: Iterable[str] = PRUNABLE_DIRS,
    include_declarations: bool = True,
) -> list[Path]:
    """List searchable files under ``root``.

    With ``include_declarations=False``, ``.d.ts`` files are left out even
    though they end with ``.ts``.

    Raises:
        DiscoveryError: ``root`` does not exist or is not a directory.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise DiscoveryError.not_a_directory(str(root))

    suffixes = tuple(extensions)
    excluded = frozenset(exclude_dirs)

    def _on_error(err: OSError) -> None:
        log.warning("discovery_walk_error", path=err.filename, error=err.strerror)

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in sorted(filenames):
            if not filename.endswith(suffixes):
                continue
            if not include_declarations and filename.endswith(DECLARATION_SUFFIX):
                continue
            files.append(Path(dirpath) / filename)

    log.debug("discovery_complete", root=str(root_path), files=len(files))
    return files
