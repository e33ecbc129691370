# Baserow Upload MCP Server
# File: client.py
# Version: v1
"""High-level client for the Baserow REST API.

Implements:

- list_workspaces() / list_applications() / list_tables() / list_fields()
  for schema discovery
- list_rows() for a single, size-capped page of sample rows
- upload_file_via_url() / upload_file_bytes() for user-file storage
- patch_row() to write values into one row

Every method issues exactly one HTTP request. Nothing is retried and nothing
is cached; failures surface as RemoteRequestError (HTTP status) or
NetworkError (transport).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
from httpx import HTTPStatusError, RequestError

from .config import BaserowConfig
from .errors import NetworkError, RemoteRequestError
from .models import Application, Field, RowPage, Table, Workspace, parse_field


def _as_list(data: Any) -> List[Dict[str, Any]]:
    """Accept a bare JSON list or a paginated ``{"results": [...]}`` object."""
    raw_items = data.get("results") if isinstance(data, dict) else data
    if not isinstance(raw_items, list):
        return []
    return [item for item in raw_items if isinstance(item, dict)]


@dataclass
class BaserowClient:
    """Wrapper around the Baserow workspace, database and user-file APIs."""

    config: BaserowConfig

    # Injected by tests (httpx.MockTransport); None means real network I/O.
    transport: Optional[httpx.AsyncBaseTransport] = None

    def __post_init__(self) -> None:
        self.config.require_credentials()

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {
            "Authorization": f"Token {self.config.api_token}",
            "Accept": "application/json",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_tls,
            transport=self.transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.config.base_url}{path}"
        headers = self._headers(json_body=json is not None)

        async with self._http_client() as http_client:
            try:
                response = await http_client.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=json,
                    files=files,
                )
            except RequestError as exc:
                raise NetworkError(
                    f"Error calling Baserow API at '{url}': {exc}"
                ) from exc

            try:
                response.raise_for_status()
            except HTTPStatusError as exc:
                raise RemoteRequestError(
                    status_code=response.status_code,
                    reason=response.reason_phrase,
                    body=response.text[:500] or None,
                    url=url,
                ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteRequestError(
                status_code=response.status_code,
                reason="Invalid JSON response",
                body=response.text[:500] or None,
                url=url,
            ) from exc

    # ------------------------------------------------------------------
    # Schema discovery
    # ------------------------------------------------------------------

    async def list_workspaces(self) -> List[Workspace]:
        """List all workspaces the token can see."""
        data = await self._request("GET", "/api/workspaces/")
        return [
            Workspace(id=item.get("id"), name=str(item.get("name") or ""), raw=item)
            for item in _as_list(data)
        ]

    async def list_applications(self, workspace_id: int | str) -> List[Application]:
        """List every application of a workspace, regardless of its type."""
        data = await self._request(
            "GET", f"/api/applications/workspace/{workspace_id}/"
        )
        return [
            Application(
                id=item.get("id"),
                name=str(item.get("name") or ""),
                type=str(item.get("type") or ""),
                raw=item,
            )
            for item in _as_list(data)
        ]

    async def list_tables(self, database_id: int | str) -> List[Table]:
        data = await self._request(
            "GET", f"/api/database/tables/database/{database_id}/"
        )
        return [
            Table(
                id=item.get("id"),
                name=str(item.get("name") or ""),
                order=item.get("order"),
                raw=item,
            )
            for item in _as_list(data)
        ]

    async def list_fields(self, table_id: int | str) -> List[Field]:
        data = await self._request("GET", f"/api/database/fields/table/{table_id}/")
        return [parse_field(item) for item in _as_list(data)]

    async def list_rows(self, table_id: int | str, size: int) -> RowPage:
        """Fetch the first page of rows, at most ``size`` of them."""
        data = await self._request(
            "GET",
            f"/api/database/rows/table/{table_id}/",
            params={"size": int(size)},
        )
        count = data.get("count") if isinstance(data, dict) else None
        return RowPage(count=int(count or 0), results=_as_list(data))

    # ------------------------------------------------------------------
    # User files & rows
    # ------------------------------------------------------------------

    async def upload_file_via_url(
        self, url: str, filename: Optional[str] = None
    ) -> Dict[str, Any]:
        """Let Baserow download ``url`` into its user-file storage."""
        payload: Dict[str, Any] = {"url": url}
        if filename:
            payload["filename"] = filename
        return await self._request(
            "POST", "/api/user-files/upload-via-url/", json=payload
        )

    async def upload_file_bytes(self, content: bytes, filename: str) -> Dict[str, Any]:
        """Upload raw bytes as a multipart ``file`` part named ``filename``."""
        return await self._request(
            "POST",
            "/api/user-files/upload-file/",
            files={"file": (filename, content)},
        )

    async def patch_row(
        self,
        table_id: int | str,
        row_id: int | str,
        values: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Update the given field values of one row and return the new row."""
        return await self._request(
            "PATCH",
            f"/api/database/rows/table/{table_id}/{row_id}/",
            json=values,
        )
