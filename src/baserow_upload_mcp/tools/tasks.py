# Baserow Upload MCP Server
# File: tools/tasks.py
# Version: v1
#
# NOTE: This module is the single place where we define "business logic"
# that is exposed as MCP tools.  The stdio transport simply calls
# `register_tools(server)` to wire these up.

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import urlparse

from mcp.server.fastmcp.exceptions import ToolError

from ..client import BaserowClient
from ..config import BaserowConfig
from ..structure import StructureWalker
from ..uploads import UploadOrchestrator
from .formatting import format_structure_report, format_upload_message


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _cap_int(value: int, cap: int, min_value: int = 1) -> tuple[int, bool]:
    """Clamp an integer to [min_value, cap]. Returns (effective, cap_applied)."""
    try:
        v = int(value)
    except (TypeError, ValueError):
        v = min_value

    if v < min_value:
        v = min_value
        return v, True

    if cap > 0 and v > cap:
        return cap, True

    return v, False


def _make_client(cfg: Optional[BaserowConfig] = None) -> BaserowClient:
    """Create a BaserowClient from environment variables.

    Raises ConfigurationError when BASEROW_API_URL or BASEROW_API_TOKEN is
    missing, before any request is made.

    Note: Callers should prefer invoking this with *no arguments* to keep
    unit tests monkeypatch-friendly (tests replace _make_client with a
    no-arg lambda).
    """
    cfg = cfg or BaserowConfig.from_env()
    return BaserowClient(config=cfg)


def validate_url(url: str) -> None:
    """Reject anything that is not an absolute http(s) URL."""
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid arguments: url must be an http(s) URL, got {url!r}")


def validate_row_target(
    table_id: Optional[str],
    row_id: Optional[str],
    field_name: Optional[str],
) -> None:
    """tableId, rowId and fieldName go together: all of them or none."""
    supplied = [bool(v) for v in (table_id, row_id, field_name)]
    if any(supplied) and not all(supplied):
        raise ValueError(
            "If providing table update parameters, tableId, rowId, and "
            "fieldName are all required"
        )


# ---------------------------------------------------------------------------
# Core async tasks (library-style)
# ---------------------------------------------------------------------------


async def upload_image_url(
    url: str,
    filename: Optional[str] = None,
    table_id: Optional[str] = None,
    row_id: Optional[str] = None,
    field_name: Optional[str] = None,
) -> Dict[str, Any]:
    validate_url(url)
    validate_row_target(table_id, row_id, field_name)

    orchestrator = UploadOrchestrator(client=_make_client())
    result = await orchestrator.upload_from_url(
        url,
        filename=filename,
        table_id=table_id,
        row_id=row_id,
        field_ref=field_name,
    )
    return result.to_dict()


async def upload_file(
    file_path: str,
    filename: Optional[str] = None,
    table_id: Optional[str] = None,
    row_id: Optional[str] = None,
    field_name: Optional[str] = None,
) -> Dict[str, Any]:
    validate_row_target(table_id, row_id, field_name)

    orchestrator = UploadOrchestrator(client=_make_client())
    result = await orchestrator.upload_from_local_file(
        file_path,
        filename=filename,
        table_id=table_id,
        row_id=row_id,
        field_ref=field_name,
    )
    return result.to_dict()


async def read_baserow_structure(
    include_rows: bool = False,
    max_rows: int = 5,
) -> Dict[str, Any]:
    cfg = BaserowConfig.from_env()
    effective_max_rows, cap_applied = _cap_int(
        max_rows, cfg.max_sample_rows, min_value=1
    )

    walker = StructureWalker(client=_make_client())
    report = await walker.walk(
        include_rows=bool(include_rows), max_rows=effective_max_rows
    )

    summary = report.summary
    message = (
        f"Found {summary.total_workspaces} workspaces, "
        f"{summary.total_applications} applications, "
        f"{summary.total_tables} tables, and {summary.total_fields} fields"
    )

    return {
        "success": True,
        "structure": report.to_dict(),
        "warnings": list(report.warnings),
        "message": message,
        "meta": {
            "include_rows": bool(include_rows),
            "requested_max_rows": max_rows,
            "effective_max_rows": effective_max_rows,
            "cap_max_rows": cfg.max_sample_rows,
            "cap_applied": bool(cap_applied),
        },
    }


# ---------------------------------------------------------------------------
# MCP tool registration
# ---------------------------------------------------------------------------


def register_tools(server: Any) -> None:
    """Register MCP tools on an MCP Server-like instance.

    Tool argument names are camelCase because they are part of the public
    tool schema. Failures are raised as ToolError so the MCP layer reports
    them as error results.
    """
    if server is None or not hasattr(server, "tool"):
        raise ValueError(
            "register_tools(server) expects an MCP Server-like object that exposes a .tool() decorator."
        )

    @server.tool(
        name="upload_image_url",
        description=(
            "Upload an image from a URL to Baserow and optionally update a table row "
            "with the uploaded image. Pass tableId, rowId and fieldName together; "
            "fieldName may be a field name, a numeric field ID or 'field_<ID>'."
        ),
    )
    async def mcp_upload_image_url(
        url: str,
        filename: Optional[str] = None,
        tableId: Optional[str] = None,  # noqa: N803
        rowId: Optional[str] = None,  # noqa: N803
        fieldName: Optional[str] = None,  # noqa: N803
    ) -> str:
        try:
            result = await upload_image_url(
                url,
                filename=filename,
                table_id=tableId,
                row_id=rowId,
                field_name=fieldName,
            )
        except (ValueError, OSError, RuntimeError) as exc:
            raise ToolError(f"Error: {exc}") from exc
        return format_upload_message(
            f"image from {url}", result, table_id=tableId, row_id=rowId
        )

    @server.tool(
        name="upload_file",
        description=(
            "Upload a file from the local filesystem of the machine running this "
            "server to Baserow and optionally update a table row with it. Pass "
            "tableId, rowId and fieldName together."
        ),
    )
    async def mcp_upload_file(
        filePath: str,  # noqa: N803
        filename: Optional[str] = None,
        tableId: Optional[str] = None,  # noqa: N803
        rowId: Optional[str] = None,  # noqa: N803
        fieldName: Optional[str] = None,  # noqa: N803
    ) -> str:
        try:
            result = await upload_file(
                filePath,
                filename=filename,
                table_id=tableId,
                row_id=rowId,
                field_name=fieldName,
            )
        except (ValueError, OSError, RuntimeError) as exc:
            raise ToolError(f"Error: {exc}") from exc
        return format_upload_message(
            f"file from {filePath}", result, table_id=tableId, row_id=rowId
        )

    @server.tool(
        name="read_baserow_structure",
        description=(
            "Read all workspaces, database applications, tables and fields in Baserow, "
            "optionally with a few sample rows per table."
        ),
    )
    async def mcp_read_baserow_structure(
        includeRows: bool = False,  # noqa: N803
        maxRows: int = 5,  # noqa: N803
    ) -> str:
        try:
            result = await read_baserow_structure(
                include_rows=includeRows, max_rows=maxRows
            )
        except (ValueError, RuntimeError) as exc:
            raise ToolError(f"Error: {exc}") from exc
        return format_structure_report(result, include_rows=includeRows)
