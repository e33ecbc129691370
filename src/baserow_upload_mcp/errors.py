# Baserow Upload MCP Server
# File: errors.py
# Version: v1

"""Exception types raised by the Baserow client and the workflows above it."""

from __future__ import annotations

from typing import Optional


class BaserowMCPError(RuntimeError):
    """Base class for all errors raised by this package."""


class ConfigurationError(BaserowMCPError):
    """The credential context (API URL / token) is missing."""


class NetworkError(BaserowMCPError):
    """The Baserow API could not be reached (DNS, connection, TLS, ...)."""


class RemoteRequestError(BaserowMCPError):
    """Baserow answered with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.url = url

        message = f"{status_code} {reason}".rstrip()
        if body:
            message = f"{message}. {body}"
        super().__init__(message)


class FieldResolutionError(BaserowMCPError):
    """A field reference could not be mapped to a field id."""

    def __init__(self, table_id: str | int, field_ref: str | int, reason: str) -> None:
        self.table_id = table_id
        self.field_ref = field_ref
        super().__init__(
            f"Could not resolve field {field_ref!r} in table {table_id}: {reason}"
        )


class StructureReadError(BaserowMCPError):
    """The root workspace listing failed, so no structure can be returned."""


class UploadError(BaserowMCPError):
    """Creating the user file in Baserow failed."""
