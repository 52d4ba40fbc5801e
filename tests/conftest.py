from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cef_codec.core.models import CefEvent

COOL_LINE = "CEF:0|Cool Vendor|Cool Product|1.0|COOL_THING|Something cool happened.|Unknown|src=127.0.0.1"


@pytest.fixture
def cool_event() -> CefEvent:
    return CefEvent(
        version=0,
        device_vendor="Cool Vendor",
        device_product="Cool Product",
        device_version="1.0",
        device_event_class_id="COOL_THING",
        name="Something cool happened.",
        severity="Unknown",
        extensions={"src": "127.0.0.1"},
    )


@pytest.fixture
def cool_line() -> str:
    return COOL_LINE


@pytest.fixture
def write_cef_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    COOL_LINE,
                    "",
                    "2025-12-30T08:12:01Z [INFO] service started",
                    "CEF:x|Cool Vendor|Cool Product|1.0|COOL_THING|Bad version|3|",
                    "CEF:0|Security|ThreatManager|1.0|100|Login failed|8|src=1.2.3.4 msg=bad_password",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write
