# Baserow Upload MCP Server
# File: models.py
# Version: v1

"""Domain models used by the Baserow Upload MCP server.

Everything here is transient: instances are built from live API responses
for the duration of one tool call. ``to_dict()`` produces the JSON shape the
tools hand back to callers (camelCase keys, as in the structure report).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Type


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


@dataclass
class Field:
    """A Baserow table field without type-specific extras."""

    id: int
    name: str
    type: str
    primary: bool = False
    order: Optional[int] = None
    description: Optional[str] = None

    # Raw JSON payload from the API, for debugging / advanced use.
    raw: Optional[Dict[str, Any]] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Field":
        return cls(**cls._base_kwargs(item))

    @staticmethod
    def _base_kwargs(item: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": item.get("id"),
            "name": item.get("name") or "",
            "type": item.get("type") or "",
            "primary": bool(item.get("primary") or False),
            "order": item.get("order"),
            "description": item.get("description") or None,
            "raw": item,
        }

    def extension(self) -> Dict[str, Any]:
        """Type-specific properties merged into ``to_dict()``."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "primary": self.primary,
            "order": self.order,
            "description": self.description,
        }
        data.update(self.extension())
        return data


@dataclass
class FileField(Field):
    """A ``file`` field."""

    file_types: Optional[List[str]] = None
    multiple_files: bool = False

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "FileField":
        return cls(
            **cls._base_kwargs(item),
            file_types=item.get("file_types") or None,
            multiple_files=bool(item.get("multiple_files") or False),
        )

    def extension(self) -> Dict[str, Any]:
        return {"fileTypes": self.file_types, "multipleFiles": self.multiple_files}


@dataclass
class SelectOption:
    id: Optional[int]
    value: str
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "value": self.value, "color": self.color}


@dataclass
class SelectField(Field):
    """A ``single_select`` or ``multiple_select`` field."""

    select_options: List[SelectOption] = field(default_factory=list)

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "SelectField":
        options = [
            SelectOption(
                id=opt.get("id"),
                value=str(opt.get("value") or ""),
                color=opt.get("color"),
            )
            for opt in item.get("select_options") or []
            if isinstance(opt, dict)
        ]
        return cls(**cls._base_kwargs(item), select_options=options)

    def extension(self) -> Dict[str, Any]:
        return {"selectOptions": [opt.to_dict() for opt in self.select_options]}


@dataclass
class LinkRowField(Field):
    """A ``link_row`` field pointing at another table."""

    link_row_table: Any = None
    link_row_table_id: Optional[int] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "LinkRowField":
        return cls(
            **cls._base_kwargs(item),
            link_row_table=item.get("link_row_table") or None,
            link_row_table_id=item.get("link_row_table_id") or None,
        )

    def extension(self) -> Dict[str, Any]:
        return {
            "linkRowTable": self.link_row_table,
            "linkRowTableId": self.link_row_table_id,
        }


_FIELD_VARIANTS: Dict[str, Type[Field]] = {
    "file": FileField,
    "single_select": SelectField,
    "multiple_select": SelectField,
    "link_row": LinkRowField,
}


def parse_field(item: Dict[str, Any]) -> Field:
    """Build the Field variant matching the payload's ``type`` tag."""
    variant = _FIELD_VARIANTS.get(str(item.get("type") or ""), Field)
    return variant.from_api(item)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


@dataclass
class Table:
    """A table inside a database application."""

    id: int
    name: str
    order: Optional[int] = None
    fields: List[Field] = field(default_factory=list)

    # Populated only when sample rows were requested.
    row_count: int = 0
    sample_rows: List[Dict[str, Any]] = field(default_factory=list)

    raw: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "order": self.order,
            "fields": [f.to_dict() for f in self.fields],
            "rowCount": self.row_count,
            "sampleRows": list(self.sample_rows),
        }


@dataclass
class Application:
    """A workspace application (database, builder, ...)."""

    DATABASE_TYPE: ClassVar[str] = "database"

    id: int
    name: str
    type: str
    tables: List[Table] = field(default_factory=list)

    raw: Optional[Dict[str, Any]] = None

    @property
    def is_database(self) -> bool:
        return self.type == self.DATABASE_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "tables": [t.to_dict() for t in self.tables],
        }


@dataclass
class Workspace:
    id: int
    name: str
    applications: List[Application] = field(default_factory=list)

    raw: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "applications": [a.to_dict() for a in self.applications],
        }


@dataclass
class RowPage:
    """One page of rows from the list-rows endpoint."""

    # Total number of rows in the table as reported by Baserow.
    count: int
    results: List[Dict[str, Any]] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class StructureSummary:
    """Raw counts of entities returned by each successful fetch.

    These are *not* counts of the nested output: applications that are not
    databases are counted in ``total_applications`` but never nested.
    """

    total_workspaces: int = 0
    total_applications: int = 0
    total_tables: int = 0
    total_fields: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalWorkspaces": self.total_workspaces,
            "totalApplications": self.total_applications,
            "totalTables": self.total_tables,
            "totalFields": self.total_fields,
        }


@dataclass
class StructureReport:
    workspaces: List[Workspace] = field(default_factory=list)
    summary: StructureSummary = field(default_factory=StructureSummary)

    # Absorbed per-level failures, in the order they happened.
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "workspaces": [w.to_dict() for w in self.workspaces],
            "summary": self.summary.to_dict(),
        }


@dataclass
class OperationResult:
    """Outcome of an upload, with the optional attach step.

    ``updated_row`` and ``row_update_error`` are mutually exclusive; both are
    absent when no attach was requested.
    """

    uploaded_file: Dict[str, Any]
    updated_row: Optional[Dict[str, Any]] = None
    row_update_error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.updated_row is not None and self.row_update_error is not None:
            raise ValueError("updated_row and row_update_error are mutually exclusive")

    @property
    def success(self) -> bool:
        # The upload succeeded, otherwise no result would exist.
        return True

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": self.success,
            "uploaded_file": self.uploaded_file,
        }
        if self.updated_row is not None:
            data["updated_row"] = self.updated_row
        elif self.row_update_error is not None:
            data["row_update_error"] = self.row_update_error
        return data
