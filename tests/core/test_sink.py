from __future__ import annotations

import io
import logging
from dataclasses import replace

import pytest

from cef_codec.core.models import CefEvent
from cef_codec.core.sink import FAILURE_MESSAGE, LoggerSink, StreamSink, emit_event


def test_emit_event_writes_line_to_out(cool_event: CefEvent, cool_line: str) -> None:
    out, err = io.StringIO(), io.StringIO()
    assert emit_event(cool_event, StreamSink(out=out, err=err)) is True
    assert out.getvalue() == cool_line + "\n"
    assert err.getvalue() == ""


def test_emit_event_writes_failure_to_err(cool_event: CefEvent) -> None:
    out, err = io.StringIO(), io.StringIO()
    broken = replace(cool_event, name="")
    assert emit_event(broken, StreamSink(out=out, err=err)) is False
    assert out.getvalue() == ""
    assert err.getvalue() == FAILURE_MESSAGE + "\n"


def test_emit_event_defaults_to_stdout(cool_event: CefEvent, cool_line: str, capsys) -> None:
    assert emit_event(cool_event) is True
    captured = capsys.readouterr()
    assert captured.out == cool_line + "\n"
    assert captured.err == ""


def test_logger_sink(cool_event: CefEvent, cool_line: str, caplog) -> None:
    caplog.set_level(logging.INFO, logger="cef.events")
    sink = LoggerSink(logging.getLogger("cef.events"))

    assert emit_event(cool_event, sink) is True
    assert emit_event(replace(cool_event, severity=""), sink) is False

    records = [r for r in caplog.records if r.name == "cef.events"]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (logging.INFO, cool_line),
        (logging.ERROR, FAILURE_MESSAGE),
    ]


def test_sink_errors_propagate(cool_event: CefEvent) -> None:
    class BrokenSink:
        def write_event(self, line: str) -> None:
            raise OSError("disk full")

        def write_failure(self, message: str) -> None:
            raise AssertionError("not expected")

    with pytest.raises(OSError):
        emit_event(cool_event, BrokenSink())


def test_emit_event_none_header_field(cool_event: CefEvent) -> None:
    out, err = io.StringIO(), io.StringIO()
    broken = replace(cool_event, device_vendor=None)
    assert emit_event(broken, StreamSink(out=out, err=err)) is False
    assert out.getvalue() == ""
    assert err.getvalue() == FAILURE_MESSAGE + "\n"
