"""Decode errors.

Every failure raised while decoding a line derives from ``ParseError``; the
first error encountered aborts the decode and no partial record is returned.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for all decode failures."""


# Syntax / structure


class UnexpectedEndOfInputError(ParseError):
    """The line ended while a field was still being read."""

    def __init__(self, context: str | None = None) -> None:
        self.context = context
        msg = "unexpected end of input"
        if context:
            msg = f"{msg} while reading {context}"
        super().__init__(msg)


class ExpectedTokenError(ParseError):
    """A specific character was required but another one was found."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected!r}, found {found!r}")


class FieldTooShortError(ParseError):
    """A bounded field captured fewer characters than its minimum."""

    label = "field too short"

    def __init__(self, minimum: int, got: int) -> None:
        self.minimum = minimum
        self.got = got
        super().__init__(f"{self.label}: need at least {minimum}, got {got}")


class TooFewDigitsError(FieldTooShortError):
    """A numeric field had fewer digits than required."""

    label = "too few digits"


class FieldTooLongError(ParseError):
    """A bounded field continued past its maximum length."""

    label = "field too long"

    def __init__(self, maximum: int) -> None:
        self.maximum = maximum
        super().__init__(f"{self.label}: at most {maximum} allowed")


class TooManyDigitsError(FieldTooLongError):
    """A numeric token was longer than the field allows."""

    label = "too many digits"


# Semantic / domain


class BadSeverityError(ParseError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"severity code out of range: {value}")


class BadFacilityError(ParseError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"facility code out of range: {value}")


class IntConversionError(ParseError):
    """Digits were captured but do not fit the target integer."""

    def __init__(self, text: str, reason: str = "does not fit in a signed 32-bit integer") -> None:
        self.text = text
        super().__init__(f"cannot convert {text!r}: {reason}")


class MonthConversionError(ParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unrecognized month {token!r}")


# Encoding


class InvalidEncodingError(ParseError):
    """Raw input bytes are not well-formed UTF-8."""


class StringConversionError(ParseError):
    """Decoded text cannot be represented as well-formed UTF-8 (e.g. lone surrogates)."""


class MissingFieldError(ParseError):
    """A required field is absent. Not raised by the RFC 3164 grammar."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing required field: {field}")
