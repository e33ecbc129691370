# Baserow Upload MCP Server
# File: tests/test_models.py
# Version: v1

import pytest

from baserow_upload_mcp.models import (
    Field,
    FileField,
    LinkRowField,
    OperationResult,
    SelectField,
    StructureReport,
    parse_field,
)


def test_parse_field_defaults_missing_values() -> None:
    field = parse_field({"id": 1, "name": "Docs", "type": "file"})

    assert isinstance(field, FileField)
    assert field.to_dict() == {
        "id": 1,
        "name": "Docs",
        "type": "file",
        "primary": False,
        "order": None,
        "description": None,
        "fileTypes": None,
        "multipleFiles": False,
    }


@pytest.mark.parametrize(
    "ftype, cls",
    [
        ("single_select", SelectField),
        ("multiple_select", SelectField),
        ("link_row", LinkRowField),
        ("text", Field),
        ("formula", Field),
    ],
)
def test_parse_field_picks_variant_by_type(ftype, cls) -> None:
    assert type(parse_field({"id": 1, "name": "x", "type": ftype})) is cls


def test_plain_field_has_no_extension_keys() -> None:
    data = parse_field({"id": 1, "name": "x", "type": "text", "file_types": ["a"]}).to_dict()
    assert "fileTypes" not in data
    assert "selectOptions" not in data


def test_select_without_options_is_empty_list() -> None:
    assert parse_field({"id": 1, "name": "x", "type": "multiple_select"}).to_dict()[
        "selectOptions"
    ] == []


def test_operation_result_never_carries_both_outcomes() -> None:
    with pytest.raises(ValueError):
        OperationResult(uploaded_file={}, updated_row={"id": 1}, row_update_error="x")

    assert OperationResult(uploaded_file={"name": "a"}, row_update_error="boom").to_dict() == {
        "success": True,
        "uploaded_file": {"name": "a"},
        "row_update_error": "boom",
    }


def test_empty_report_shape() -> None:
    assert StructureReport().to_dict() == {
        "workspaces": [],
        "summary": {
            "totalWorkspaces": 0,
            "totalApplications": 0,
            "totalTables": 0,
            "totalFields": 0,
        },
    }
