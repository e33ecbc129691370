# Baserow Upload MCP Server
# File: tools/__init__.py
# Version: v1

"""MCP tools exposed by this server."""

from __future__ import annotations

from .tasks import register_tools

__all__ = ["register_tools"]
