"""JSON-friendly view of a decoded message.

Field order follows the record: severity, facility, version, timestamp,
hostname, proc_id, tag, msg. Absent fields become ``null``; severity and
facility use their short names; a process id is a bare integer or a string.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import SyslogMessage


class SyslogMessageModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: str = Field(description="Short severity name, e.g. 'info'.")
    facility: str = Field(description="Short facility name, e.g. 'cron'.")
    version: int = Field(description="Format version marker (0 for RFC 3164).")
    timestamp: int | None = Field(description="Seconds since the epoch, UTC.")
    hostname: str | None
    proc_id: int | str | None = Field(description="Numeric pid or process name.")
    tag: str | None
    msg: str

    @classmethod
    def from_message(cls, message: SyslogMessage) -> SyslogMessageModel:
        proc_id: int | str | None = None
        if message.proc_id is not None:
            proc_id = message.proc_id.value
        return cls(
            severity=message.severity.as_str(),
            facility=message.facility.as_str(),
            version=message.version,
            timestamp=message.timestamp,
            hostname=message.hostname,
            proc_id=proc_id,
            tag=message.tag,
            msg=message.msg,
        )


def message_to_dict(message: SyslogMessage) -> dict[str, Any]:
    """Convert a SyslogMessage into a JSON-serializable dict."""
    return SyslogMessageModel.from_message(message).model_dump()


def message_to_json(message: SyslogMessage) -> str:
    """Serialize a SyslogMessage as compact JSON."""
    return SyslogMessageModel.from_message(message).model_dump_json()
