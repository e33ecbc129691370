# Baserow Upload MCP Server
# File: uploads.py
# Version: v1

"""Upload a file to Baserow and optionally attach it to a row.

The upload and the attach are two separate phases. Once the upload has
succeeded the caller always gets the uploaded-file descriptor back: attach
problems (unknown field, stale row id, HTTP errors) are reported in
``OperationResult.row_update_error`` instead of being raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .client import BaserowClient
from .errors import (
    BaserowMCPError,
    FieldResolutionError,
    RemoteRequestError,
    UploadError,
)
from .fields import FieldResolver
from .models import OperationResult

logger = logging.getLogger(__name__)


@dataclass
class UploadOrchestrator:
    client: BaserowClient
    resolver: FieldResolver = field(init=False)

    def __post_init__(self) -> None:
        self.resolver = FieldResolver(client=self.client)

    async def upload_from_url(
        self,
        url: str,
        filename: Optional[str] = None,
        table_id: Optional[str] = None,
        row_id: Optional[str] = None,
        field_ref: Optional[str] = None,
    ) -> OperationResult:
        """Have Baserow fetch ``url``, then attach the file if a target is given."""
        try:
            uploaded = await self.client.upload_file_via_url(url, filename=filename)
        except BaserowMCPError as exc:
            raise UploadError(f"Upload failed: {exc}") from exc

        logger.info("Uploaded %s as %s", url, uploaded.get("name"))
        return await self._finish(uploaded, table_id, row_id, field_ref)

    async def upload_from_local_file(
        self,
        file_path: str,
        filename: Optional[str] = None,
        table_id: Optional[str] = None,
        row_id: Optional[str] = None,
        field_ref: Optional[str] = None,
    ) -> OperationResult:
        """Upload a file from local disk, then attach it if a target is given.

        The file name sent to Baserow defaults to the basename of
        ``file_path``.
        """
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileNotFoundError(
                f"File not found or unreadable: {file_path}"
            ) from exc
        original_filename = filename or path.name

        try:
            uploaded = await self.client.upload_file_bytes(content, original_filename)
        except BaserowMCPError as exc:
            raise UploadError(f"File upload failed: {exc}") from exc

        logger.info("Uploaded %s as %s", file_path, uploaded.get("name"))
        return await self._finish(uploaded, table_id, row_id, field_ref)

    # ------------------------------------------------------------------
    # Attach phase
    # ------------------------------------------------------------------

    async def _finish(
        self,
        uploaded: Dict[str, Any],
        table_id: Optional[str],
        row_id: Optional[str],
        field_ref: Optional[str],
    ) -> OperationResult:
        if not (table_id and row_id and field_ref):
            return OperationResult(uploaded_file=uploaded)
        try:
            field_id = await self.resolver.resolve(table_id, field_ref)
        except FieldResolutionError:
            return OperationResult(
                uploaded_file=uploaded,
                row_update_error=(
                    f'Failed to resolve field "{field_ref}" in table {table_id}'
                ),
            )

        # Attaching replaces the field's current files.
        values = {f"field_{field_id}": [uploaded]}

        try:
            updated_row = await self.client.patch_row(table_id, row_id, values)
        except RemoteRequestError as exc:
            logger.warning("Row update failed: %s", exc)
            return OperationResult(
                uploaded_file=uploaded,
                row_update_error=(
                    f"Failed to update row: {exc.status_code} {exc.reason}"
                ),
            )
        except BaserowMCPError as exc:
            logger.warning("Row update failed: %s", exc)
            return OperationResult(
                uploaded_file=uploaded,
                row_update_error=f"Failed to update row: {exc}",
            )

        logger.info("Attached %s to row %s in table %s", uploaded.get("name"), row_id, table_id)
        return OperationResult(uploaded_file=uploaded, updated_row=updated_row)
