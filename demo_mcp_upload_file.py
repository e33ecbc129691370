# demo_mcp_upload_file.py
# Version: v1
#
# Demo: upload a local file with the upload_file task.
#
# Usage (bash):
#
#   export BASEROW_API_URL="https://api.baserow.io"
#   export BASEROW_API_TOKEN="<database token>"
#   python demo_mcp_upload_file.py ./invoice.pdf [table_id row_id field]

import asyncio
import sys

from baserow_upload_mcp.tools import tasks


async def main(argv: list[str]) -> None:
    if len(argv) not in (1, 4):
        print("usage: demo_mcp_upload_file.py PATH [TABLE_ID ROW_ID FIELD]")
        return

    file_path = argv[0]
    table_id, row_id, field = (argv[1:] + [None, None, None])[:3]

    print("Calling MCP task: upload_file()")
    print(f"Path: {file_path}")
    print()

    result = await tasks.upload_file(
        file_path,
        table_id=table_id,
        row_id=row_id,
        field_name=field,
    )

    for key, value in result.items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
