# Baserow Upload MCP Server
# File: tools/formatting.py
# Version: v1

"""Render task results as the plain-text messages returned by the tools."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

# Sample rows are previewed, not dumped.
_MAX_PREVIEW_ROWS = 3
_MAX_PREVIEW_FIELDS = 3
_MAX_VALUE_CHARS = 50


def format_upload_message(
    source: str,
    result: Dict[str, Any],
    table_id: Optional[str] = None,
    row_id: Optional[str] = None,
) -> str:
    """Summarise an upload result.

    ``source`` is the human description of what was uploaded, e.g.
    ``"image from https://..."``.
    """
    lines = [f"Successfully uploaded {source}"]

    uploaded = result.get("uploaded_file")
    if uploaded:
        lines.append(f"File name: {uploaded.get('name')}")
        lines.append(f"File URL: {uploaded.get('url')}")
    if result.get("updated_row") is not None:
        lines.append(f"Updated row {row_id} in table {table_id}")
    if result.get("row_update_error"):
        lines.append(f"Warning: {result['row_update_error']}")

    return "\n".join(lines)


def _preview_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        text = json.dumps(value, ensure_ascii=False, default=str)
    else:
        text = str(value)
    return text[:_MAX_VALUE_CHARS]


def _field_lines(field: Dict[str, Any]) -> List[str]:
    header = f"      - {field['name']} ({field['type']})"
    if field.get("primary"):
        header += " [PRIMARY]"
    if field.get("description"):
        header += f" - {field['description']}"

    lines = [header, f"        ID: {field['id']}, Order: {field.get('order')}"]

    ftype = field.get("type")
    if ftype == "file":
        file_types = field.get("fileTypes")
        allowed = ", ".join(file_types) if file_types else "Any"
        lines.append(
            f"        File Types: {allowed}, Multiple: {bool(field.get('multipleFiles'))}"
        )
    elif ftype in ("single_select", "multiple_select"):
        options = field.get("selectOptions") or []
        if options:
            values = ", ".join(str(opt.get("value")) for opt in options)
            lines.append(f"        Options: {values}")
    elif ftype == "link_row":
        lines.append(f"        Links to Table ID: {field.get('linkRowTableId')}")

    return lines


def _sample_row_lines(table: Dict[str, Any]) -> List[str]:
    rows = table.get("sampleRows") or []
    if not rows:
        return []

    lines = ["", f"    Sample Rows (showing {len(rows)}):"]
    preview_fields = table.get("fields", [])[:_MAX_PREVIEW_FIELDS]
    for row in rows[:_MAX_PREVIEW_ROWS]:
        parts = []
        for field in preview_fields:
            value = row.get(f"field_{field['id']}", row.get(field["name"]))
            if value is not None:
                parts.append(f"{field['name']}: {_preview_value(value)}")
        lines.append(f"      Row {row.get('id')}: {', '.join(parts)}")
    return lines


def format_structure_report(result: Dict[str, Any], include_rows: bool = False) -> str:
    """Render the output of ``read_baserow_structure`` as an indented report."""
    structure = result.get("structure") or {}
    lines = [result.get("message", ""), "", "BASEROW STRUCTURE REPORT"]

    for workspace in structure.get("workspaces", []):
        lines.append("")
        lines.append(f"Workspace: {workspace['name']} (ID: {workspace['id']})")

        for app in workspace.get("applications", []):
            lines.append(
                f"  Application: {app['name']} (ID: {app['id']}, Type: {app['type']})"
            )

            for table in app.get("tables", []):
                fields = table.get("fields", [])
                lines.append(f"    Table: {table['name']} (ID: {table['id']})")
                lines.append(f"    Row Count: {table.get('rowCount') or 'Unknown'}")
                lines.append(f"    Fields ({len(fields)}):")
                for field in fields:
                    lines.extend(_field_lines(field))
                if include_rows:
                    lines.extend(_sample_row_lines(table))

    warnings = result.get("warnings") or []
    if warnings:
        lines.append("")
        lines.append(f"Warnings ({len(warnings)}):")
        lines.extend(f"  - {w}" for w in warnings)

    return "\n".join(lines)
