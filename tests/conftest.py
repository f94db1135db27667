from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from syslog_rfc3164.core.clock import FixedClock

SAMPLE_LINES = [
    "<78>Jan  8 12:14:16 2017 host1[123] CROND some_message",
    "<134>Feb 18 20:53:31 hostname.local nginx: I am a message",
    "not a syslog line",
    "",
    "<190>May 13 21:45:18 coconut hotdog: hi",
    "<3>Mar  1 00:00:01 2020 db01 postgres[99] FATAL: out of memory",
]


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(2023)


@pytest.fixture
def write_syslog() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
