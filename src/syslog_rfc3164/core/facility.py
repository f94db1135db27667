"""Syslog facility codes (RFC 3164 section 4.1.1)."""

from __future__ import annotations

from enum import IntEnum


class SyslogFacility(IntEnum):
    """The 24 standard facilities. Values are already shifted down (PRI >> 3)."""

    KERN = 0
    USER = 1
    MAIL = 2
    DAEMON = 3
    AUTH = 4
    SYSLOG = 5
    LPR = 6
    NEWS = 7
    UUCP = 8
    CRON = 9
    AUTHPRIV = 10
    FTP = 11
    NTP = 12
    AUDIT = 13
    ALERT = 14
    CLOCKD = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23

    @classmethod
    def from_int(cls, value: int) -> SyslogFacility | None:
        """Return the facility for a numeric code, or None when out of range."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_str(cls, name: str) -> SyslogFacility:
        """Look up a facility by its short name (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            valid = ", ".join(f.as_str() for f in cls)
            raise ValueError(f"Unknown facility '{name}'. Valid values: {valid}.") from e

    def as_str(self) -> str:
        """Short lowercase name, e.g. ``kern``."""
        return self.name.lower()
