from __future__ import annotations

import json

from syslog_rfc3164.core.facility import SyslogFacility
from syslog_rfc3164.core.models import Pid, ProcName, SyslogMessage
from syslog_rfc3164.core.parser import parse_message
from syslog_rfc3164.core.serialization import message_to_dict, message_to_json
from syslog_rfc3164.core.severity import SyslogSeverity


def _empty(**overrides) -> SyslogMessage:
    fields = {
        "severity": SyslogSeverity.INFO,
        "facility": SyslogFacility.KERN,
        "version": 1,
        "timestamp": None,
        "hostname": None,
        "proc_id": None,
        "tag": None,
        "msg": "",
    }
    fields.update(overrides)
    return SyslogMessage(**fields)


def test_json_field_order_and_nulls() -> None:
    assert message_to_json(_empty()) == (
        '{"severity":"info","facility":"kern","version":1,"timestamp":null,'
        '"hostname":null,"proc_id":null,"tag":null,"msg":""}'
    )


def test_proc_id_variants() -> None:
    assert message_to_dict(_empty(proc_id=Pid(123)))["proc_id"] == 123
    assert message_to_dict(_empty(proc_id=ProcName("123x")))["proc_id"] == "123x"
    assert json.loads(message_to_json(_empty(proc_id=ProcName("7a"))))["proc_id"] == "7a"


def test_decoded_message_to_dict() -> None:
    msg = parse_message("<78>Jan  8 12:14:16 2017 host1[123] CROND some_message")
    assert message_to_dict(msg) == {
        "severity": "info",
        "facility": "cron",
        "version": 0,
        "timestamp": 1483877656,
        "hostname": "host1",
        "proc_id": 123,
        "tag": "]",
        "msg": "CROND some_message",
    }
