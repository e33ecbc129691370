# demo_mcp_read_structure.py
# Version: v1
#
# Demo: call the read_baserow_structure task directly and print the report.
#
# Usage (bash):
#
#   export BASEROW_API_URL="https://api.baserow.io"
#   export BASEROW_API_TOKEN="<database token>"
#   export BASEROW_TEST_INCLUDE_ROWS=1
#   export BASEROW_TEST_MAX_ROWS=3
#   python demo_mcp_read_structure.py

import asyncio
import os
from typing import Any, Dict

from baserow_upload_mcp.tools import tasks
from baserow_upload_mcp.tools.formatting import format_structure_report

INCLUDE_ROWS = os.environ.get("BASEROW_TEST_INCLUDE_ROWS", "0") == "1"
MAX_ROWS = int(os.environ.get("BASEROW_TEST_MAX_ROWS", "5"))


async def main() -> None:
    print("Calling MCP task: read_baserow_structure()")
    print(f"Include rows: {INCLUDE_ROWS}")
    print(f"Max rows:     {MAX_ROWS}")
    print()

    result: Dict[str, Any] = await tasks.read_baserow_structure(
        include_rows=INCLUDE_ROWS,
        max_rows=MAX_ROWS,
    )

    print(format_structure_report(result, include_rows=INCLUDE_ROWS))
    print()
    print("Meta:", result.get("meta"))


if __name__ == "__main__":
    asyncio.run(main())
