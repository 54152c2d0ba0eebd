"""Application context for MCP handlers.

Single object passed to all tool handlers. Built once at server start; the
grammar, query and config it holds are read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codesearch.config.models import CodeSearchConfig
    from codesearch.search.ops import SearchOps


@dataclass
class AppContext:
    """Context object passed to all MCP tool handlers."""

    config: CodeSearchConfig
    search_ops: SearchOps

    @classmethod
    def create(cls, config: CodeSearchConfig | None = None) -> AppContext:
        """Factory wiring SearchOps to the loaded config.

        Raises:
            QueryConstructionError: the reference query does not compile.
        """
        from codesearch.config.models import CodeSearchConfig
        from codesearch.search.ops import SearchOps

        config = config or CodeSearchConfig()
        return cls(config=config, search_ops=SearchOps(config.search))
