# Baserow Upload MCP Server
# File: transports/stdio_server.py
# Version: v1

"""STDIO entrypoint for the Baserow Upload MCP server.

This is the script behind the ``baserow-upload-mcp`` console command.

It:

- sends logs to stderr (stdout carries the JSON-RPC stream),
- refuses to start without BASEROW_API_URL and BASEROW_API_TOKEN,
- creates a FastMCP server and registers the Baserow tools, and
- runs the built-in stdio transport.
"""

from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP

from ..config import BaserowConfig
from ..errors import ConfigurationError
from ..tools import tasks

logger = logging.getLogger("baserow_upload_mcp.stdio")


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_server() -> FastMCP:
    mcp = FastMCP("baserow-upload-mcp")
    tasks.register_tools(mcp)
    return mcp


def main() -> None:
    """Synchronous entrypoint for console_scripts."""
    cfg = BaserowConfig.from_env()
    _configure_logging(cfg.log_level)

    try:
        cfg.require_credentials()
    except ConfigurationError as exc:
        logger.error("Error: %s", exc)
        sys.exit(1)

    mcp = build_server()
    logger.info("Baserow Upload MCP server running on stdio (%s)", cfg.base_url)

    # Let FastMCP handle stdio + event loop setup.
    mcp.run()


if __name__ == "__main__":
    main()
