from __future__ import annotations

import pytest

from syslog_rfc3164.core.clock import FixedClock
from syslog_rfc3164.core.errors import (
    BadFacilityError,
    ExpectedTokenError,
    FieldTooLongError,
    FieldTooShortError,
    IntConversionError,
    MonthConversionError,
    TooFewDigitsError,
    TooManyDigitsError,
    UnexpectedEndOfInputError,
)
from syslog_rfc3164.core.facility import SyslogFacility
from syslog_rfc3164.core.fields import (
    decode_pri,
    parse_hostname,
    parse_month,
    parse_num,
    parse_pri,
    parse_proc_id,
    parse_term,
    parse_timestamp,
)
from syslog_rfc3164.core.models import Pid, ProcName
from syslog_rfc3164.core.severity import SyslogSeverity


def test_parse_num_bounds() -> None:
    assert parse_num("12:", 2, 2) == (12, ":")
    assert parse_num("7 x", 1, 2) == (7, " x")
    with pytest.raises(TooFewDigitsError):
        parse_num("1:", 2, 2)
    with pytest.raises(TooManyDigitsError):
        parse_num("123:", 1, 2)
    with pytest.raises(UnexpectedEndOfInputError):
        parse_num("12", 1, 2)


def test_parse_num_overflow() -> None:
    with pytest.raises(IntConversionError):
        parse_num("99999999999 ", 1, 11)


def test_parse_month() -> None:
    assert parse_month("Jan 8") == (1, " 8")
    assert parse_month("Dec 31") == (12, " 31")


def test_parse_month_is_case_sensitive() -> None:
    with pytest.raises(MonthConversionError) as exc:
        parse_month("jan 8")
    assert exc.value.token == "jan"


def test_parse_month_accepts_punctuation_between_letter_ranges() -> None:
    with pytest.raises(MonthConversionError) as exc:
        parse_month("J[n 8")
    assert exc.value.token == "J[n"


def test_parse_month_end_of_input() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        parse_month("Ja")


def test_decode_pri() -> None:
    assert decode_pri(0) == (SyslogSeverity.EMERG, SyslogFacility.KERN)
    assert decode_pri(78) == (SyslogSeverity.INFO, SyslogFacility.CRON)
    assert decode_pri(191) == (SyslogSeverity.DEBUG, SyslogFacility.LOCAL7)
    with pytest.raises(BadFacilityError) as exc:
        decode_pri(192)
    assert exc.value.value == 24


def test_parse_pri() -> None:
    (sev, fac), rest = parse_pri("<13>rest")
    assert (sev, fac) == (SyslogSeverity.NOTICE, SyslogFacility.USER)
    assert rest == "rest"
    with pytest.raises(ExpectedTokenError):
        parse_pri("13>rest")
    with pytest.raises(TooFewDigitsError):
        parse_pri("<>rest")
    with pytest.raises(TooManyDigitsError):
        parse_pri("<1234>rest")


def test_parse_timestamp_placeholder() -> None:
    assert parse_timestamp("- host", FixedClock(2000)) == (None, " host")


def test_parse_timestamp_with_year() -> None:
    ts, rest = parse_timestamp("Jan  8 12:14:16 2017 host1", FixedClock(2000))
    assert ts == 1483877656
    assert rest == " host1"


def test_parse_timestamp_without_year_uses_clock() -> None:
    ts, rest = parse_timestamp("Jan 8 12:14:16 host", FixedClock(2017))
    assert ts == 1483877656
    assert rest == " host"


def test_parse_timestamp_day_with_leading_zero() -> None:
    ts, _ = parse_timestamp("Jan 08 12:14:16 2017 h", FixedClock(2000))
    assert ts == 1483877656


def test_parse_timestamp_rejects_bad_separator() -> None:
    with pytest.raises(ExpectedTokenError) as exc:
        parse_timestamp("Jan 8 12-14-16 h", FixedClock(2000))
    assert exc.value.expected == ":"


def test_parse_timestamp_rejects_three_space_padding() -> None:
    with pytest.raises(TooFewDigitsError):
        parse_timestamp("Jan   8 12:14:16 h", FixedClock(2000))


def test_parse_timestamp_normalizes_out_of_range_day() -> None:
    # Calendar arithmetic only: Feb 30 rolls over into March.
    feb30, _ = parse_timestamp("Feb 30 00:00:00 2021 h", FixedClock(2000))
    mar2, _ = parse_timestamp("Mar  2 00:00:00 2021 h", FixedClock(2000))
    assert feb30 == mar2


def test_parse_hostname_stops_at_bracket() -> None:
    assert parse_hostname("host1[123]") == ("host1", "[123]")
    assert parse_hostname("host1]x ") == ("host1", "]x ")


def test_parse_hostname_placeholder() -> None:
    assert parse_hostname("- rest") == (None, " rest")


def test_parse_hostname_end_of_input_is_error() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        parse_hostname("host1")


def test_parse_hostname_too_short() -> None:
    with pytest.raises(FieldTooShortError):
        parse_hostname(" host")
    with pytest.raises(FieldTooShortError):
        parse_hostname("[123] x")


def test_parse_hostname_length_bound() -> None:
    name = "h" * 255
    assert parse_hostname(name + " x") == (name, " x")
    with pytest.raises(FieldTooLongError):
        parse_hostname("h" * 256 + " x")


def test_parse_term_runs_to_end_of_input() -> None:
    assert parse_term("CROND") == ("CROND", "")
    assert parse_term("t" * 255) == ("t" * 255, "")


def test_parse_term_keeps_brackets() -> None:
    assert parse_term("sshd[42]: hi") == ("sshd[42]:", " hi")


def test_parse_term_bounds() -> None:
    assert parse_term("- msg") == (None, " msg")
    with pytest.raises(FieldTooShortError):
        parse_term(" msg")
    with pytest.raises(FieldTooLongError):
        parse_term("t" * 256 + " msg")


def test_parse_term_empty_remainder_is_absent() -> None:
    assert parse_term("") == (None, "")


def test_parse_proc_id_numeric_and_name() -> None:
    assert parse_proc_id("123] CROND") == (Pid(123), "] CROND")
    assert parse_proc_id("123 CROND") == (Pid(123), "CROND")
    assert parse_proc_id("nginx: msg") == (ProcName("nginx:"), "msg")


def test_parse_proc_id_placeholder_leaves_input_for_tag() -> None:
    assert parse_proc_id("- tag msg") == (None, "- tag msg")
    assert parse_proc_id("-") == (None, "-")


def test_parse_proc_id_absent_leaves_input_untouched() -> None:
    assert parse_proc_id(" msg") == (None, " msg")
    assert parse_proc_id("tag") == (None, "tag")


def test_digit_errors_have_their_own_messages() -> None:
    with pytest.raises(TooManyDigitsError, match="too many digits: at most 2 allowed"):
        parse_num("123:", 1, 2)
    with pytest.raises(TooFewDigitsError, match="too few digits: need at least 2, got 1"):
        parse_num("1:", 2, 2)
    with pytest.raises(FieldTooLongError, match="field too long: at most 255 allowed"):
        parse_term("t" * 256 + " msg")


def test_parse_num_allows_full_int32_range() -> None:
    assert parse_num("2147483647 ", 1, 10) == (2147483647, " ")
    with pytest.raises(IntConversionError):
        parse_num("2147483648 ", 1, 10)
