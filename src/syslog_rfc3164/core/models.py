"""Decoded syslog record."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .facility import SyslogFacility
from .scanners import INT32_MAX, INT32_MIN
from .severity import SyslogSeverity

_PID_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class Pid:
    """Numeric process id."""

    value: int


@dataclass(frozen=True, slots=True)
class ProcName:
    """Non-numeric process identifier, kept verbatim."""

    value: str


ProcId = Pid | ProcName


def proc_id_from_token(token: str) -> ProcId:
    """Numeric id when ``token`` is a signed 32-bit integer, else a name."""
    if _PID_RE.fullmatch(token):
        value = int(token)
        if INT32_MIN <= value <= INT32_MAX:
            return Pid(value)
    return ProcName(token)


@dataclass(frozen=True, slots=True)
class SyslogMessage:
    """One decoded RFC 3164 line."""

    severity: SyslogSeverity
    facility: SyslogFacility
    version: int  # always 0 for this grammar
    timestamp: int | None  # seconds since the epoch, UTC
    hostname: str | None
    proc_id: ProcId | None
    tag: str | None
    msg: str
