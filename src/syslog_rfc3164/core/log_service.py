"""Decode syslog files line by line.

The decoder itself works on one line at a time; this module does the file
I/O and line splitting around it, and applies the log-and-skip policy for
lines that fail to decode.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .clock import Clock
from .errors import ParseError
from .models import SyslogMessage
from .parser import parse_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedLine:
    line_no: int
    message: SyslogMessage


@dataclass(frozen=True, slots=True)
class RejectedLine:
    line_no: int
    raw: str  # lossy decode of the rejected bytes, for display only
    error: ParseError


LineResult = DecodedLine | RejectedLine


@dataclass(slots=True)
class FileReport:
    """All lines of one file, split into decoded and rejected."""

    decoded: list[DecodedLine] = field(default_factory=list)
    rejected: list[RejectedLine] = field(default_factory=list)

    @property
    def messages(self) -> list[SyslogMessage]:
        return [d.message for d in self.decoded]


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a log file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1


async def iter_lines(
    log_path: str | Path,
    *,
    clock: Clock | None = None,
    max_lines: int | None = None,
) -> AsyncIterator[LineResult]:
    """Yield a DecodedLine or RejectedLine for every non-blank line.

    ``max_lines`` stops reading after that many physical lines.
    """
    if max_lines is not None and max_lines < 1:
        raise ValueError("max_lines must be >= 1")

    path = Path(log_path)
    if not path.exists():
        raise FileNotFoundError(f"Log file not found: {path}")

    async with _open_binary(path) as f:
        async for line_no, raw in _enumerate_async(f, start=1):
            if max_lines is not None and line_no > max_lines:
                logger.info("Stopped reading %s after %d lines", path, max_lines)
                break
            line = raw.rstrip(b"\r\n")
            if not line:
                continue
            try:
                message = parse_message(line, clock=clock)
            except ParseError as e:
                logger.warning("Rejected line %d of %s: %s", line_no, path, e)
                yield RejectedLine(
                    line_no=line_no,
                    raw=line.decode("utf-8", errors="replace"),
                    error=e,
                )
                continue
            yield DecodedLine(line_no=line_no, message=message)


async def decode_file(log_path: str | Path, **iter_kwargs) -> FileReport:
    """Collect iter_lines into a FileReport."""
    report = FileReport()
    async for result in iter_lines(log_path, **iter_kwargs):
        if isinstance(result, DecodedLine):
            report.decoded.append(result)
        else:
            report.rejected.append(result)
    if report.rejected:
        logger.info(
            "Decoded %d lines from %s, rejected %d",
            len(report.decoded),
            log_path,
            len(report.rejected),
        )
    return report
