"""Decoder for legacy BSD-style (RFC 3164) syslog lines."""

from __future__ import annotations

from .core import (
    FixedClock,
    ParseError,
    Pid,
    ProcId,
    ProcName,
    SyslogFacility,
    SyslogMessage,
    SyslogSeverity,
    message_to_dict,
    message_to_json,
    parse_message,
)

__all__ = [
    "FixedClock",
    "ParseError",
    "Pid",
    "ProcId",
    "ProcName",
    "SyslogFacility",
    "SyslogMessage",
    "SyslogSeverity",
    "message_to_dict",
    "message_to_json",
    "parse_message",
]
