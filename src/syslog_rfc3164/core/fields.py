"""Field parsers for the RFC 3164 header.

Each parser takes the unread remainder of the line and returns
``(value, rest)`` or raises a ``ParseError``. Fields never look at each
other's data; the assembler in ``parser.py`` threads ``rest`` through them.
"""

from __future__ import annotations

import calendar

from .clock import Clock
from .errors import (
    BadFacilityError,
    BadSeverityError,
    FieldTooLongError,
    FieldTooShortError,
    IntConversionError,
    MonthConversionError,
    ParseError,
    TooFewDigitsError,
    TooManyDigitsError,
    UnexpectedEndOfInputError,
)
from .facility import SyslogFacility
from .models import ProcId, proc_id_from_token
from .scanners import (
    INT32_MAX,
    expect_char,
    is_digit,
    is_month_letter,
    is_printable,
    maybe_char,
    take_while,
)
from .severity import SyslogSeverity

PLACEHOLDER = "-"
TOKEN_MIN_LEN = 1
TOKEN_MAX_LEN = 255

_MONTHS = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}


def parse_num(
    text: str,
    min_digits: int,
    max_digits: int,
    *,
    context: str | None = None,
) -> tuple[int, str]:
    """Read a run of ``min_digits``..``max_digits`` decimal digits."""
    digits, rest = take_while(text, is_digit, max_digits)
    if rest is None:
        raise UnexpectedEndOfInputError(context)
    if len(digits) < min_digits:
        raise TooFewDigitsError(min_digits, len(digits))
    if rest and is_digit(rest[0]):
        raise TooManyDigitsError(max_digits)
    value = int(digits)
    if value > INT32_MAX:
        raise IntConversionError(digits)
    return value, rest


def parse_month(text: str) -> tuple[int, str]:
    """Read a three-letter English month abbreviation (case-sensitive)."""
    token, rest = take_while(text, is_month_letter, 3)
    if rest is None:
        raise UnexpectedEndOfInputError("month")
    month = _MONTHS.get(token)
    if month is None:
        raise MonthConversionError(token)
    return month, rest


def decode_pri(value: int) -> tuple[SyslogSeverity, SyslogFacility]:
    """Split a PRI value into severity (low 3 bits) and facility (the rest)."""
    severity = SyslogSeverity.from_int(value & 0x7)
    if severity is None:
        raise BadSeverityError(value & 0x7)
    facility = SyslogFacility.from_int(value >> 3)
    if facility is None:
        raise BadFacilityError(value >> 3)
    return severity, facility


def parse_pri(text: str) -> tuple[tuple[SyslogSeverity, SyslogFacility], str]:
    """Read ``<N>`` with 1-3 digits and decode it."""
    rest = expect_char(text, "<", context="priority")
    value, rest = parse_num(rest, 1, 3, context="priority")
    rest = expect_char(rest, ">", context="priority")
    return decode_pri(value), rest


def parse_timestamp(text: str, clock: Clock) -> tuple[int | None, str]:
    """Read ``Mmm dd hh:mm:ss [yyyy]`` or the ``-`` placeholder.

    The day may be padded with a second space instead of a leading zero
    (``Jan  8``). Without a year, ``clock`` supplies the current one. The
    fields are taken as UTC and returned as epoch seconds.
    """
    if text.startswith(PLACEHOLDER):
        return None, text[1:]

    month, rest = parse_month(text)
    rest = expect_char(rest, " ", context="timestamp")
    rest = maybe_char(rest, " ")
    day, rest = parse_num(rest, 1, 2, context="day of month")
    rest = expect_char(rest, " ", context="timestamp")
    hour, rest = parse_num(rest, 2, 2, context="hour")
    rest = expect_char(rest, ":", context="timestamp")
    minute, rest = parse_num(rest, 2, 2, context="minute")
    rest = expect_char(rest, ":", context="timestamp")
    second, rest = parse_num(rest, 2, 2, context="second")

    try:
        year, rest = parse_num(maybe_char(rest, " "), 4, 4, context="year")
    except ParseError:
        year = clock.current_year()

    try:
        ts = calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
    except ValueError as e:
        raise IntConversionError(f"{year:04d}", "year out of range") from e
    return ts, rest


def _scan_token(
    text: str,
    *,
    brackets_terminate: bool,
    end_is_error: bool,
    context: str,
) -> tuple[str | None, str]:
    if text.startswith(PLACEHOLDER):
        return None, text[1:]

    for idx, ch in enumerate(text):
        if not is_printable(ch) or (brackets_terminate and ch in "[]"):
            if idx < TOKEN_MIN_LEN:
                raise FieldTooShortError(TOKEN_MIN_LEN, idx)
            return text[:idx], text[idx:]
        if idx >= TOKEN_MAX_LEN:
            raise FieldTooLongError(TOKEN_MAX_LEN)

    if end_is_error:
        raise UnexpectedEndOfInputError(context)
    if not text:
        return None, text
    return text, ""


def parse_hostname(text: str) -> tuple[str | None, str]:
    """Read a printable-ASCII token, stopping at whitespace or ``[``/``]``.

    Running into the end of the line is an error: a hostname is always
    followed by something.
    """
    return _scan_token(text, brackets_terminate=True, end_is_error=True, context="hostname")


def parse_proc_id(text: str) -> tuple[ProcId | None, str]:
    """Read an optional process id using the hostname token grammar.

    Anything that does not scan as a token, including the ``-`` placeholder,
    leaves the input untouched and yields None; the tag parser then sees the
    same text. A single trailing space after a real token is consumed.
    """
    try:
        token, rest = _scan_token(
            text, brackets_terminate=True, end_is_error=True, context="process id"
        )
    except ParseError:
        return None, text
    if token is None:
        return None, text
    return proc_id_from_token(token), maybe_char(rest, " ")


def parse_term(text: str) -> tuple[str | None, str]:
    """Read a printable-ASCII token (brackets included) such as the tag.

    Unlike ``parse_hostname``, the token may run to the end of the line.
    """
    return _scan_token(text, brackets_terminate=False, end_is_error=False, context="tag")
