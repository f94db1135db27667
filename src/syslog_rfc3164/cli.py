from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from syslog_rfc3164.core.clock import FixedClock
from syslog_rfc3164.core.config import configure_logging, resolve_service_config
from syslog_rfc3164.core.log_service import DecodedLine, iter_lines
from syslog_rfc3164.core.serialization import message_to_json


def _parse_year(s: str) -> int:
    try:
        year = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("year must be an integer (e.g., 2017)") from e
    if not 1 <= year <= 9999:
        raise argparse.ArgumentTypeError("year must be between 1 and 9999")
    return year


async def _run(path: Path, *, year: int | None, max_lines: int, strict: bool) -> int:
    clock = FixedClock(year) if year is not None else None
    decoded = rejected = 0
    async for result in iter_lines(path, clock=clock, max_lines=max_lines):
        if isinstance(result, DecodedLine):
            decoded += 1
            print(message_to_json(result.message))
            continue
        rejected += 1
        if strict:
            print(f"Error: line {result.line_no}: {result.error}", file=sys.stderr)
            return 1
    print(f"\nDecoded {decoded} lines, rejected {rejected}.", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Decode RFC 3164 syslog lines to JSON.")
    p.add_argument("log_path")
    p.add_argument("--year", type=_parse_year, default=None, help="Year for timestamps without one")
    p.add_argument("--max-lines", type=int, default=None, help="Stop after N lines (default: config)")
    p.add_argument("--strict", action="store_true", help="Exit non-zero on the first rejected line")
    args = p.parse_args(argv)

    try:
        cfg = resolve_service_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    configure_logging(cfg)

    max_lines = args.max_lines if args.max_lines is not None else cfg.max_lines
    try:
        code = asyncio.run(
            _run(Path(args.log_path), year=args.year, max_lines=max_lines, strict=args.strict)
        )
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
