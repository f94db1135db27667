"""Year source for timestamps that omit the year."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Supplies the calendar year used when a timestamp carries none."""

    def current_year(self) -> int:
        ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Reads the current UTC year at decode time."""

    def current_year(self) -> int:
        return datetime.now(UTC).year


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Always reports the same year (tests, replaying archived logs)."""

    year: int

    def current_year(self) -> int:
        return self.year


SYSTEM_CLOCK = SystemClock()
