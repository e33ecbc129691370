# demo_mcp_upload_image_url.py
# Version: v1
#
# Demo: upload an image by URL and, optionally, attach it to a row.
#
# Usage (bash):
#
#   export BASEROW_API_URL="https://api.baserow.io"
#   export BASEROW_API_TOKEN="<database token>"
#   export BASEROW_TEST_IMAGE_URL="https://picsum.photos/200"
#   # optional, all three or none:
#   export BASEROW_TEST_TABLE=789 BASEROW_TEST_ROW=42 BASEROW_TEST_FIELD="Main Image"
#   python demo_mcp_upload_image_url.py

import asyncio
import os

from baserow_upload_mcp.tools import tasks

IMAGE_URL = os.environ.get("BASEROW_TEST_IMAGE_URL", "https://picsum.photos/200")
TABLE_ID = os.environ.get("BASEROW_TEST_TABLE")
ROW_ID = os.environ.get("BASEROW_TEST_ROW")
FIELD = os.environ.get("BASEROW_TEST_FIELD")


async def main() -> None:
    print("Calling MCP task: upload_image_url()")
    print(f"URL:    {IMAGE_URL}")
    print(f"Target: table={TABLE_ID} row={ROW_ID} field={FIELD!r}")
    print()

    result = await tasks.upload_image_url(
        IMAGE_URL,
        table_id=TABLE_ID,
        row_id=ROW_ID,
        field_name=FIELD,
    )

    uploaded = result["uploaded_file"]
    print(f"Uploaded: {uploaded.get('name')} -> {uploaded.get('url')}")

    if "updated_row" in result:
        print(f"Row updated: id={result['updated_row'].get('id')}")
    elif "row_update_error" in result:
        print(f"Row NOT updated: {result['row_update_error']}")


if __name__ == "__main__":
    asyncio.run(main())
