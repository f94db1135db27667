"""Primitive scanners over the unread remainder of a line.

Parse state is the remaining input as a plain ``str``; every scanner takes it
and hands back what it consumed together with the new remainder.
"""

from __future__ import annotations

from collections.abc import Callable

from .errors import ExpectedTokenError, UnexpectedEndOfInputError

PRINTABLE_MIN = 33  # "!"
PRINTABLE_MAX = 126  # "~"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def is_digit(ch: str) -> bool:
    """ASCII decimal digit (``str.isdigit`` also accepts other scripts)."""
    return "0" <= ch <= "9"


def is_month_letter(ch: str) -> bool:
    # Covers "A".."z", including the punctuation between "Z" and "a".
    return "A" <= ch <= "z"


def is_printable(ch: str) -> bool:
    """Printable, non-space ASCII (33..126)."""
    return PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX


def take_while(
    text: str,
    predicate: Callable[[str], bool],
    max_chars: int,
) -> tuple[str, str | None]:
    """Consume the longest prefix (at most ``max_chars``) matching ``predicate``.

    Returns ``(prefix, rest)``. When the predicate holds for the whole input
    and no terminating character is seen, ``rest`` is None so callers can
    tell "ran off the end" apart from a normal match.
    """
    for idx, ch in enumerate(text):
        if idx == max_chars or not predicate(ch):
            return text[:idx], text[idx:]
    return text, None


def expect_char(text: str, expected: str, *, context: str | None = None) -> str:
    """Consume exactly ``expected`` or fail."""
    if not text:
        raise UnexpectedEndOfInputError(context)
    if text[0] != expected:
        raise ExpectedTokenError(expected, text[0])
    return text[1:]


def maybe_char(text: str, expected: str) -> str:
    """Consume ``expected`` if it is next; otherwise leave the input alone."""
    if text.startswith(expected):
        return text[1:]
    return text
