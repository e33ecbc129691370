# Baserow Upload MCP Server
# File: structure.py
# Version: v1

"""Walk workspaces → applications → tables → fields (and sample rows).

Only the root workspace listing is allowed to fail the walk. Any deeper
failure is logged, recorded in ``StructureReport.warnings`` and replaced by
an empty list so that the parent entity still appears in the output.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List

from .client import BaserowClient
from .errors import BaserowMCPError, StructureReadError
from .models import (
    Application,
    Field,
    RowPage,
    StructureReport,
    Table,
    Workspace,
)

logger = logging.getLogger(__name__)


@dataclass
class StructureWalker:
    client: BaserowClient

    async def walk(self, include_rows: bool = False, max_rows: int = 5) -> StructureReport:
        """Read the whole visible structure of the Baserow instance.

        Raises StructureReadError if the workspaces themselves cannot be
        listed; otherwise always returns a (possibly partial) report.
        """
        report = StructureReport()

        try:
            workspaces = await self.client.list_workspaces()
        except BaserowMCPError as exc:
            raise StructureReadError(
                f"Failed to read Baserow structure: Failed to fetch workspaces: {exc}"
            ) from exc

        report.summary.total_workspaces = len(workspaces)

        for workspace in workspaces:
            await self._walk_workspace(report, workspace, include_rows, max_rows)
            report.workspaces.append(workspace)

        return report

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    async def _walk_workspace(
        self,
        report: StructureReport,
        workspace: Workspace,
        include_rows: bool,
        max_rows: int,
    ) -> None:
        try:
            applications = await self.client.list_applications(workspace.id)
        except BaserowMCPError as exc:
            self._warn(
                report,
                f"Failed to fetch applications for workspace {workspace.id}: {exc}",
            )
            return

        report.summary.total_applications += len(applications)

        for application in applications:
            if not application.is_database:
                continue
            await self._walk_application(report, application, include_rows, max_rows)
            workspace.applications.append(application)

    async def _walk_application(
        self,
        report: StructureReport,
        application: Application,
        include_rows: bool,
        max_rows: int,
    ) -> None:
        try:
            tables = await self.client.list_tables(application.id)
        except BaserowMCPError as exc:
            self._warn(
                report,
                f"Failed to fetch tables for application {application.id}: {exc}",
            )
            return

        report.summary.total_tables += len(tables)

        for table in tables:
            await self._walk_table(report, table, include_rows, max_rows)
            application.tables.append(table)

    async def _walk_table(
        self,
        report: StructureReport,
        table: Table,
        include_rows: bool,
        max_rows: int,
    ) -> None:
        # Fields and rows do not depend on each other; fetch them together.
        if include_rows:
            fields_result, rows_result = await asyncio.gather(
                self.client.list_fields(table.id),
                self.client.list_rows(table.id, size=max_rows),
                return_exceptions=True,
            )
        else:
            fields_result = await self._capture(self.client.list_fields(table.id))
            rows_result = None

        if isinstance(fields_result, BaseException):
            self._reraise_unexpected(fields_result)
            self._warn(
                report, f"Failed to fetch fields for table {table.id}: {fields_result}"
            )
        else:
            fields: List[Field] = fields_result
            report.summary.total_fields += len(fields)
            table.fields = fields

        if isinstance(rows_result, BaseException):
            self._reraise_unexpected(rows_result)
            self._warn(
                report, f"Failed to fetch rows for table {table.id}: {rows_result}"
            )
        elif rows_result is not None:
            page: RowPage = rows_result
            table.row_count = page.count
            table.sample_rows = page.results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    async def _capture(coro) -> object:
        try:
            return await coro
        except BaserowMCPError as exc:
            return exc

    @staticmethod
    def _reraise_unexpected(exc: BaseException) -> None:
        """Only client errors are absorbed; anything else is a bug."""
        if not isinstance(exc, BaserowMCPError):
            raise exc

    @staticmethod
    def _warn(report: StructureReport, message: str) -> None:
        logger.warning(message)
        report.warnings.append(message)
