"""FastMCP server creation and wiring.

Two-phase tool logging: tool_start with params, tool_complete with summary.
Expected failures (MCPError) log a warning; anything else logs an error with
the traceback at DEBUG.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from codesearch.config.models import CodeSearchConfig
    from codesearch.mcp.context import AppContext
    from codesearch.mcp.registry import ToolSpec

log = structlog.get_logger(__name__)

SERVER_NAME = "codebase-search"


class ToolResponse(BaseModel):
    """Standardized tool response envelope."""

    result: Any = None
    meta: dict[str, Any] = Field(default_factory=dict)
    success: bool
    error: str | None = None


def _extract_log_params(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Key params for the tool_start log line, with long strings shortened."""
    params: dict[str, Any] = {}
    for key, value in kwargs.items():
        if isinstance(value, str) and len(value) > 50:
            params[key] = value[:50] + "..."
        elif value is not None:
            params[key] = value
    return params


def _extract_result_summary(result: dict[str, Any]) -> dict[str, Any]:
    """Summary metrics from a tool result for the tool_complete log line."""
    summary: dict[str, Any] = {}
    if "total" in result:
        summary["total"] = result["total"]
    if "truncated" in result:
        summary["truncated"] = result["truncated"]
    if "results" in result and isinstance(result["results"], list):
        summary["files"] = len(result["results"])
    if result.get("skipped"):
        summary["skipped"] = len(result["skipped"])
    return summary


def create_mcp_server(context: AppContext) -> FastMCP:
    """Create FastMCP server with all registered tools wired to context."""
    from fastmcp import FastMCP

    from codesearch.mcp.registry import registry

    # Import tools to trigger registration
    from codesearch.mcp.tools import search  # noqa: F401

    log.info("mcp_server_creating")

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Symbol reference search for TypeScript codebases. Prefer get_references "
            "for identifiers; use search_word for free text."
        ),
    )

    tool_count = 0
    for spec in registry.get_all():
        _wire_tool(mcp, spec, context)
        tool_count += 1

    log.info("mcp_server_created", tool_count=tool_count)
    return mcp


def _wire_tool(mcp: FastMCP, spec: ToolSpec, context: AppContext) -> None:
    """Wire a single tool spec to FastMCP.

    The handler takes the params model's fields as keyword arguments so
    FastMCP publishes a flat schema.
    """
    from fastmcp.tools.tool import FunctionTool
    from fastmcp.utilities.json_schema import dereference_refs
    from pydantic import ValidationError

    from codesearch.core.logging import clear_request_id, set_request_id
    from codesearch.mcp.errors import MCPError

    params_model = spec.params_model
    spec_handler = spec.handler

    async def handler(**kwargs: Any) -> dict[str, Any]:
        tool_name = spec.name
        request_id = set_request_id()
        start_time = time.perf_counter()
        log.info("tool_start", tool=tool_name, **_extract_log_params(kwargs))

        try:
            try:
                params = params_model(**kwargs)
            except ValidationError as e:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                first = e.errors()[0]["msg"] if e.errors() else str(e)
                log.warning("tool_validation_error", tool=tool_name, error=first, elapsed_ms=elapsed_ms)
                return ToolResponse(
                    success=False,
                    error=f"Validation error: {first}",
                    meta={
                        "request_id": request_id,
                        "error_type": "validation",
                        "validation_errors": [
                            {"field": ".".join(str(x) for x in err["loc"]), "message": err["msg"]}
                            for err in e.errors()[:5]
                        ],
                    },
                ).model_dump()

            try:
                result_data: dict[str, Any] = await spec_handler(context, params)
            except MCPError as e:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log.warning(
                    "tool_error",
                    tool=tool_name,
                    error_code=e.code.value,
                    error=e.message,
                    path=e.path,
                    elapsed_ms=elapsed_ms,
                )
                return ToolResponse(
                    success=False,
                    error=e.message,
                    meta={"request_id": request_id, "error": e.to_response().to_dict()},
                ).model_dump()
            except Exception as e:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log.error("tool_internal_error", tool=tool_name, error=str(e), elapsed_ms=elapsed_ms)
                log.debug("tool_internal_error_traceback", tool=tool_name, exc_info=True)
                return ToolResponse(
                    success=False,
                    error=str(e),
                    meta={"request_id": request_id},
                ).model_dump()

            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
            log.info(
                "tool_complete",
                tool=tool_name,
                elapsed_ms=elapsed_ms,
                **_extract_result_summary(result_data),
            )
            return ToolResponse(
                success=True,
                result=result_data,
                meta={"request_id": request_id, "timestamp": int(time.time() * 1000)},
            ).model_dump()
        finally:
            clear_request_id()

    tool = FunctionTool(
        name=spec.name,
        description=spec.description,
        parameters=dereference_refs(params_model.model_json_schema()),
        fn=handler,
    )
    mcp.add_tool(tool)


def run_server(config: CodeSearchConfig | None = None) -> None:
    """Create the MCP server and serve it over stdio.

    stdout carries the protocol, so every log output is forced to stderr
    or a file.
    """
    from codesearch.config.models import CodeSearchConfig, LogOutputConfig
    from codesearch.core.logging import configure_logging
    from codesearch.mcp.context import AppContext

    config = config or CodeSearchConfig()
    outputs = [
        out if out.destination != "stdout" else LogOutputConfig(format=out.format, level=out.level)
        for out in config.logging.outputs
    ]
    configure_logging(config=config.logging.model_copy(update={"outputs": outputs}))

    context = AppContext.create(config)
    mcp = create_mcp_server(context)

    log.info("mcp_server_running", transport="stdio")
    mcp.run()
