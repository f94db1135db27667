"""MCP tool implementations.

Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from syslog_rfc3164.core.clock import Clock, FixedClock
from syslog_rfc3164.core.config import ServiceConfig, resolve_service_config
from syslog_rfc3164.core.errors import ParseError
from syslog_rfc3164.core.log_service import RejectedLine, decode_file
from syslog_rfc3164.core.parser import parse_message
from syslog_rfc3164.core.serialization import message_to_dict
from syslog_rfc3164.core.severity import SyslogSeverity

DEFAULT_LIMIT = 200


def _parse_severities(names: Sequence[str] | None) -> set[SyslogSeverity] | None:
    """Parse user-supplied severity names (case-insensitive)."""
    if not names:
        return None
    out = {SyslogSeverity.from_str(n) for n in names if n.strip()}
    return out or None


def _clock_for(year: int | None) -> Clock | None:
    return FixedClock(year) if year is not None else None


def _error_to_dict(error: ParseError) -> dict[str, Any]:
    return {"error": type(error).__name__, "detail": str(error)}


def _rejected_to_dict(rejected: RejectedLine) -> dict[str, Any]:
    return {"line_no": rejected.line_no, "raw": rejected.raw, **_error_to_dict(rejected.error)}


def _safe_resolve(path: str, base_dir: Path | None) -> Path:
    """Resolve a path under the configured base directory (cwd by default)."""
    base = (base_dir or Path(os.getcwd())).resolve()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def decode_syslog_line_impl(*, line: str, year: int | None = None) -> dict[str, Any]:
    """Implementation for the `decode_syslog_line` MCP tool.

    Decode failures are reported in the result rather than raised, so the
    client always sees which field was rejected.
    """
    try:
        message = parse_message(line, clock=_clock_for(year))
    except ParseError as e:
        return {"ok": False, **_error_to_dict(e)}
    return {"ok": True, "message": message_to_dict(message)}


async def decode_syslog_file_impl(
    *,
    log_path: str,
    limit: int | None = None,
    severities: Sequence[str] | None = None,
    include_errors: bool = False,
    year: int | None = None,
    config: ServiceConfig | None = None,
) -> dict[str, Any]:
    """Implementation for the `decode_syslog_file` MCP tool.

    Notes
    -----
    - ``limit`` caps the number of returned messages (default 200); reading
      stops after ``max_lines`` physical lines from the service config.
    - ``severities`` filters decoded messages by short name (e.g. "err").
    - ``rejected`` always counts lines that failed to decode; their details
      are only included with ``include_errors``.
    """
    cfg = resolve_service_config(config)
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")

    wanted = _parse_severities(severities)
    path = _safe_resolve(log_path, cfg.base_dir)

    report = await decode_file(path, clock=_clock_for(year), max_lines=cfg.max_lines)

    messages = [
        {"line_no": d.line_no, **message_to_dict(d.message)}
        for d in report.decoded
        if wanted is None or d.message.severity in wanted
    ][:limit]

    out: dict[str, Any] = {
        "count": len(messages),
        "rejected": len(report.rejected),
        "messages": messages,
    }
    if include_errors:
        out["errors"] = [_rejected_to_dict(r) for r in report.rejected]
    return out
