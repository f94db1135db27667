"""RFC 3164 message decoder.

A hand-written recursive-descent parser: each header field is read in a
fixed order from the front of the remaining input, and the first failure
aborts the whole line. Example::

    >>> msg = parse_message("<78>Jan  8 12:14:16 2017 host1[123] CROND some_message")
    >>> msg.hostname, msg.proc_id, msg.msg
    ('host1', Pid(value=123), 'CROND some_message')
"""

from __future__ import annotations

import logging

from .clock import SYSTEM_CLOCK, Clock
from .errors import InvalidEncodingError, StringConversionError
from .fields import parse_hostname, parse_pri, parse_proc_id, parse_term, parse_timestamp
from .models import SyslogMessage
from .scanners import expect_char, maybe_char

logger = logging.getLogger(__name__)

MESSAGE_VERSION = 0


def _as_text(line: str | bytes | bytearray | memoryview) -> str:
    """Return ``line`` as ``str``, decoding bytes-like input as strict UTF-8."""
    if isinstance(line, str):
        return line
    if isinstance(line, (bytes, bytearray, memoryview)):
        try:
            return bytes(line).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(f"invalid UTF-8 at byte {e.start}: {e.reason}") from e
    raise TypeError(f"expected str or bytes-like input, got {type(line).__name__}")


def _checked_body(text: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise StringConversionError(
            f"message body is not valid text at position {e.start}: {e.reason}"
        ) from e
    return text


def parse_message(
    line: str | bytes | bytearray | memoryview,
    *,
    clock: Clock | None = None,
) -> SyslogMessage:
    """Decode a single syslog line.

    Parameters
    ----------
    line:
        One already-split line. ``bytes`` are decoded as UTF-8; trailing
        newlines are not stripped.
    clock:
        Year source for timestamps without a year. Defaults to the system
        clock.

    Raises
    ------
    ParseError:
        On the first field that fails to decode.
    """
    rest = _as_text(line)

    (severity, facility), rest = parse_pri(rest)
    timestamp, rest = parse_timestamp(rest, clock or SYSTEM_CLOCK)
    logger.debug("timestamp=%r rest=%r", timestamp, rest)

    rest = expect_char(rest, " ", context="hostname")
    hostname, rest = parse_hostname(rest)
    rest = maybe_char(rest, "[")
    rest = maybe_char(rest, " ")
    logger.debug("hostname=%r rest=%r", hostname, rest)

    proc_id, rest = parse_proc_id(rest)
    logger.debug("proc_id=%r rest=%r", proc_id, rest)

    tag, rest = parse_term(rest)
    rest = maybe_char(rest, " ")
    logger.debug("tag=%r rest=%r", tag, rest)

    return SyslogMessage(
        severity=severity,
        facility=facility,
        version=MESSAGE_VERSION,
        timestamp=timestamp,
        hostname=hostname,
        proc_id=proc_id,
        tag=tag,
        msg=_checked_body(rest),
    )
