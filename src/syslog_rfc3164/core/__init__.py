"""RFC 3164 decoder core: models, field parsers and the message assembler."""

from __future__ import annotations

from .clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from .errors import (
    BadFacilityError,
    BadSeverityError,
    ExpectedTokenError,
    FieldTooLongError,
    FieldTooShortError,
    IntConversionError,
    InvalidEncodingError,
    MissingFieldError,
    MonthConversionError,
    ParseError,
    StringConversionError,
    TooFewDigitsError,
    TooManyDigitsError,
    UnexpectedEndOfInputError,
)
from .facility import SyslogFacility
from .models import Pid, ProcId, ProcName, SyslogMessage, proc_id_from_token
from .parser import parse_message
from .serialization import SyslogMessageModel, message_to_dict, message_to_json
from .severity import SyslogSeverity

__all__ = [
    "SYSTEM_CLOCK",
    "BadFacilityError",
    "BadSeverityError",
    "Clock",
    "ExpectedTokenError",
    "FieldTooLongError",
    "FieldTooShortError",
    "FixedClock",
    "IntConversionError",
    "InvalidEncodingError",
    "MissingFieldError",
    "MonthConversionError",
    "ParseError",
    "Pid",
    "ProcId",
    "ProcName",
    "StringConversionError",
    "SyslogFacility",
    "SyslogMessage",
    "SyslogMessageModel",
    "SyslogSeverity",
    "SystemClock",
    "TooFewDigitsError",
    "TooManyDigitsError",
    "UnexpectedEndOfInputError",
    "message_to_dict",
    "message_to_json",
    "parse_message",
    "proc_id_from_token",
]
