"""Search result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Reference:
    """A token-exact occurrence of a symbol.

    ``line`` and ``column`` are 1-based; ``column`` counts characters.
    """

    path: str
    line: int
    column: int
    text: str  # Trimmed source line

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "column": self.column, "text": self.text}


@dataclass(frozen=True)
class SkippedFile:
    """A file the batch could not parse."""

    path: str
    error: str  # ErrorCode name, e.g. PARSE_DECODE_ERROR
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "error": self.error, "reason": self.reason}


@dataclass
class SearchResult:
    """References grouped by file, in discovery order.

    ``total`` is the running count across all files; the cap applies to it,
    not to any single file. Files without references never get an entry.
    """

    files: dict[str, list[Reference]] = field(default_factory=dict)
    truncated: bool = False
    total: int = 0
    files_scanned: int = 0
    skipped: list[SkippedFile] = field(default_factory=list)

    def add(self, reference: Reference) -> None:
        self.files.setdefault(reference.path, []).append(reference)
        self.total += 1

    @property
    def references(self) -> list[Reference]:
        return [ref for refs in self.files.values() for ref in refs]

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [
                {"file": path, "references": [ref.to_dict() for ref in refs]}
                for path, refs in self.files.items()
            ],
            "total": self.total,
            "truncated": self.truncated,
            "files_scanned": self.files_scanned,
            "skipped": [s.to_dict() for s in self.skipped],
        }


@dataclass(frozen=True)
class TextMatch:
    """A line reported by the plain-text search. ``text`` is untrimmed."""

    path: str
    line: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "text": self.text}


@dataclass
class TextSearchResult:
    """Plain-text matches grouped by file, with their own cap."""

    files: dict[str, list[TextMatch]] = field(default_factory=dict)
    truncated: bool = False
    total: int = 0

    def add(self, match: TextMatch) -> None:
        self.files.setdefault(match.path, []).append(match)
        self.total += 1

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [
                {"file": path, "matches": [m.to_dict() for m in matches]}
                for path, matches in self.files.items()
            ],
            "total": self.total,
            "truncated": self.truncated,
        }
