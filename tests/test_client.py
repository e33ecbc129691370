# Baserow Upload MCP Server
# File: tests/test_client.py
# Version: v1

"""BaserowClient against an in-process httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from baserow_upload_mcp.client import BaserowClient
from baserow_upload_mcp.errors import NetworkError, RemoteRequestError
from baserow_upload_mcp.models import FileField, LinkRowField, SelectField


@pytest.mark.asyncio
async def test_requests_carry_token_header(client, router):
    router.add("GET", "/api/workspaces/", payload=[{"id": 1, "name": "Main"}])

    workspaces = await client.list_workspaces()

    assert [(w.id, w.name) for w in workspaces] == [(1, "Main")]
    request = router.requests[0]
    assert str(request.url) == "https://api.baserow.io/api/workspaces/"
    assert request.headers["Authorization"] == "Token test_token"


@pytest.mark.asyncio
async def test_list_workspaces_accepts_paginated_payload(client, router):
    router.add(
        "GET",
        "/api/workspaces/",
        payload={"count": 2, "results": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]},
    )

    workspaces = await client.list_workspaces()
    assert [w.name for w in workspaces] == ["A", "B"]


@pytest.mark.asyncio
async def test_list_applications_keeps_every_type(client, router):
    router.add(
        "GET",
        "/api/applications/workspace/7/",
        payload=[
            {"id": 10, "name": "CRM", "type": "database"},
            {"id": 11, "name": "Site", "type": "builder"},
        ],
    )

    apps = await client.list_applications(7)
    assert [(a.id, a.type, a.is_database) for a in apps] == [
        (10, "database", True),
        (11, "builder", False),
    ]


@pytest.mark.asyncio
async def test_list_fields_builds_type_variants(client, router):
    router.add(
        "GET",
        "/api/database/fields/table/42/",
        payload=[
            {"id": 1, "name": "Name", "type": "text", "primary": True, "order": 0},
            {
                "id": 2,
                "name": "Photo",
                "type": "file",
                "order": 1,
                "file_types": ["image/*"],
                "multiple_files": True,
            },
            {
                "id": 3,
                "name": "Status",
                "type": "single_select",
                "order": 2,
                "select_options": [{"id": 5, "value": "Open", "color": "blue"}],
            },
            {
                "id": 4,
                "name": "Owner",
                "type": "link_row",
                "order": 3,
                "link_row_table": {"id": 9, "name": "People"},
                "link_row_table_id": 9,
            },
        ],
    )

    fields = await client.list_fields(42)

    assert [type(f) for f in fields[1:]] == [FileField, SelectField, LinkRowField]
    assert fields[0].to_dict() == {
        "id": 1,
        "name": "Name",
        "type": "text",
        "primary": True,
        "order": 0,
        "description": None,
    }
    assert fields[1].to_dict()["fileTypes"] == ["image/*"]
    assert fields[1].to_dict()["multipleFiles"] is True
    assert fields[2].to_dict()["selectOptions"] == [
        {"id": 5, "value": "Open", "color": "blue"}
    ]
    assert fields[3].to_dict()["linkRowTableId"] == 9


@pytest.mark.asyncio
async def test_list_rows_sends_size_and_reads_count(client, router):
    router.add(
        "GET",
        "/api/database/rows/table/42/",
        payload={"count": 120, "results": [{"id": 1}, {"id": 2}]},
    )

    page = await client.list_rows(42, size=2)

    assert page.count == 120
    assert page.results == [{"id": 1}, {"id": 2}]
    assert router.requests[0].url.params["size"] == "2"


@pytest.mark.asyncio
async def test_upload_via_url_posts_json(client, router):
    uploaded = {"name": "abc.jpg", "url": "https://media/abc.jpg"}
    router.add("POST", "/api/user-files/upload-via-url/", payload=uploaded)

    assert await client.upload_file_via_url("https://example.com/a.jpg") == uploaded
    assert await client.upload_file_via_url("https://example.com/a.jpg", filename="b.jpg") == uploaded

    assert router.json_body(0) == {"url": "https://example.com/a.jpg"}
    assert router.json_body(1) == {"url": "https://example.com/a.jpg", "filename": "b.jpg"}
    assert router.requests[0].headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_upload_file_bytes_sends_multipart(client, router):
    router.add("POST", "/api/user-files/upload-file/", payload={"name": "x", "url": "u"})

    await client.upload_file_bytes(b"hello world", "notes.txt")

    request = router.requests[0]
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="file"; filename="notes.txt"' in request.content
    assert b"hello world" in request.content


@pytest.mark.asyncio
async def test_patch_row_sends_values(client, router):
    router.add(
        "PATCH",
        "/api/database/rows/table/42/7/",
        payload={"id": 7, "field_3": [{"name": "x"}]},
    )

    row = await client.patch_row("42", "7", {"field_3": [{"name": "x"}]})

    assert row == {"id": 7, "field_3": [{"name": "x"}]}
    assert router.requests[0].method == "PATCH"
    assert router.json_body(0) == {"field_3": [{"name": "x"}]}


@pytest.mark.asyncio
async def test_http_error_raises_remote_request_error(client, router):
    router.add("GET", "/api/workspaces/", status=500, text="Server error")

    with pytest.raises(RemoteRequestError) as exc_info:
        await client.list_workspaces()

    err = exc_info.value
    assert err.status_code == 500
    assert err.reason == "Internal Server Error"
    assert err.body == "Server error"
    assert str(err) == "500 Internal Server Error. Server error"
    # Exactly one request: nothing is retried.
    assert len(router.requests) == 1


@pytest.mark.asyncio
async def test_transport_error_raises_network_error(config):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    client = BaserowClient(config=config, transport=httpx.MockTransport(handler))

    with pytest.raises(NetworkError, match="Name or service not known"):
        await client.list_workspaces()
