# Baserow Upload MCP Server
# File: transports/__init__.py
# Version: v1

"""Transports that serve the MCP tools."""
