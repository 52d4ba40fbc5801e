from __future__ import annotations

import asyncio
import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

from cef_codec.core.errors import InvalidVersionError, NotACefMessageError
from cef_codec.core.models import CefEvent
from cef_codec.core.reader import read_events


def test_read_events_reports_each_line(
    tmp_path: Path, write_cef_log: Callable[[Path], None], cool_event: CefEvent
) -> None:
    log = tmp_path / "events.log"
    write_cef_log(log)

    items = asyncio.run(read_events(log))

    assert [item.line_no for item in items] == [1, 3, 4, 5]
    assert items[0].event == cool_event
    assert isinstance(items[1].error, NotACefMessageError)
    assert isinstance(items[2].error, InvalidVersionError)
    assert items[3].ok
    assert items[3].event.extensions == {"src": "1.2.3.4", "msg": "bad_password"}
    assert all(item.raw is None for item in items)


def test_read_events_keeps_blank_lines_when_asked(
    tmp_path: Path, write_cef_log: Callable[[Path], None]
) -> None:
    log = tmp_path / "events.log"
    write_cef_log(log)

    items = asyncio.run(read_events(log, skip_blank=False, include_raw=True))

    assert len(items) == 5
    assert isinstance(items[1].error, NotACefMessageError)
    assert items[1].raw == ""


def test_read_events_gzip(tmp_path: Path, cool_line: str, cool_event: CefEvent) -> None:
    log = tmp_path / "events.log.gz"
    with gzip.open(log, "wt", encoding="utf-8") as f:
        f.write(cool_line + "\n" + cool_line + "\n")

    items = asyncio.run(read_events(log, include_raw=True))

    assert [item.event for item in items] == [cool_event, cool_event]
    assert items[0].raw == cool_line


def test_read_events_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        asyncio.run(read_events(tmp_path / "missing.log"))


def test_read_events_continues_after_oversized_version(
    tmp_path: Path, cool_line: str, cool_event: CefEvent
) -> None:
    log = tmp_path / "events.log"
    log.write_text("CEF:" + "9" * 5000 + "|V|P|1|C|N|S|\n" + cool_line + "\n", encoding="utf-8")

    items = asyncio.run(read_events(log))

    assert [item.line_no for item in items] == [1, 2]
    assert isinstance(items[0].error, InvalidVersionError)
    assert items[1].event == cool_event
