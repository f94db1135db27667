"""Syslog severity codes (RFC 3164 section 4.1.1)."""

from __future__ import annotations

from enum import IntEnum


class SyslogSeverity(IntEnum):
    """The eight standard severity levels, most urgent first."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def from_int(cls, value: int) -> SyslogSeverity | None:
        """Return the severity for a numeric code, or None when out of range."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_str(cls, name: str) -> SyslogSeverity:
        """Look up a severity by its short name (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            valid = ", ".join(s.as_str() for s in cls)
            raise ValueError(f"Unknown severity '{name}'. Valid values: {valid}.") from e

    def as_str(self) -> str:
        """Short lowercase name, e.g. ``info``."""
        return self.name.lower()
