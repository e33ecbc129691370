# Baserow Upload MCP Server
# File: fields.py
# Version: v1

"""Resolve caller-supplied field references to numeric Baserow field ids."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .client import BaserowClient
from .errors import BaserowMCPError, FieldResolutionError

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"^\d+$")
_PREFIXED_RE = re.compile(r"^field_(\d+)$")


@dataclass
class FieldResolver:
    """Map a field reference to a field id.

    Three reference forms are accepted, checked in this order:

    - a number, or a string made only of digits (``"1234"``)
    - the row-key form ``"field_1234"``
    - the human field name (exact, case-sensitive match)

    Only the last form needs a request to Baserow.
    """

    client: BaserowClient

    async def resolve(self, table_id: int | str, field_ref: int | str) -> int:
        if isinstance(field_ref, int) and not isinstance(field_ref, bool):
            return field_ref

        ref = str(field_ref)
        if _NUMERIC_RE.match(ref):
            return int(ref)

        prefixed = _PREFIXED_RE.match(ref)
        if prefixed:
            return int(prefixed.group(1))

        try:
            fields = await self.client.list_fields(table_id)
        except BaserowMCPError as exc:
            logger.warning("Field resolution failed for table %s: %s", table_id, exc)
            raise FieldResolutionError(
                table_id, ref, f"failed to get fields: {exc}"
            ) from exc

        for candidate in fields:
            if candidate.name != ref:
                continue
            if isinstance(candidate.id, bool) or not isinstance(candidate.id, int):
                logger.warning("Field %r in table %s has no usable id", ref, table_id)
                raise FieldResolutionError(table_id, ref, "field has no id")
            return candidate.id

        logger.warning("Field %r not found in table %s", ref, table_id)
        raise FieldResolutionError(table_id, ref, "no field with that name")
