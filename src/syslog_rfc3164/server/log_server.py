"""MCP server entrypoint (stdio transport).

Exposes the decoder as tools:
- decode_syslog_line: decode one line
- decode_syslog_file: decode every line of a local log file

Run locally (stdio):
    python -m syslog_rfc3164.server.log_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from syslog_rfc3164.core.config import configure_logging, resolve_service_config
from syslog_rfc3164.tools.decode import decode_syslog_file_impl, decode_syslog_line_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("syslog-rfc3164", json_response=True)


@mcp.tool()
def decode_syslog_line(line: str, year: int | None = None) -> dict[str, Any]:
    """Decode a single RFC 3164 (BSD) syslog line.

    Parameters
    ----------
    line:
        One syslog line, e.g. "<78>Jan  8 12:14:16 host1[123] CROND some_message".
    year:
        Year to assume when the timestamp has none. Defaults to the current year.

    Returns
    -------
    dict:
        {"ok": true, "message": {...}} or {"ok": false, "error": str, "detail": str}
    """
    return decode_syslog_line_impl(line=line, year=year)


@mcp.tool()
async def decode_syslog_file(
    log_path: str,
    limit: int | None = None,
    severities: Sequence[str] | None = None,
    include_errors: bool = False,
    year: int | None = None,
) -> dict[str, Any]:
    """Decode every line of a local syslog file (plain text or .gz).

    Parameters
    ----------
    log_path:
        Path under the server's base directory (SYSLOG3164_BASE_DIR, default cwd).
    limit:
        Maximum number of decoded messages returned.
    severities:
        Only return messages with these severities (e.g. ["err", "crit"]).
    include_errors:
        Include details of lines that failed to decode.
    year:
        Year to assume when a timestamp has none.

    Returns
    -------
    dict:
        {"count": int, "rejected": int, "messages": list[dict], "errors"?: list[dict]}
    """
    return await decode_syslog_file_impl(
        log_path=log_path,
        limit=limit,
        severities=severities,
        include_errors=include_errors,
        year=year,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging(resolve_service_config())
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
