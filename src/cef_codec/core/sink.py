"""Output sinks for finished CEF lines.

The sink is passed explicitly; nothing here redirects a shared logger.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from .codec import encode
from .errors import CefError
from .models import CefEvent

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "unable to create and thereby log the CEF message"


class CefSink(Protocol):
    """Destination for encoded lines and encode failures."""

    def write_event(self, line: str) -> None:
        """Write one encoded CEF line."""
        ...

    def write_failure(self, message: str) -> None:
        """Write a diagnostic for an event that could not be encoded."""
        ...


@dataclass(slots=True)
class StreamSink:
    """Write events to ``out`` and failures to ``err`` (stdout/stderr by default)."""

    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    def write_event(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def write_failure(self, message: str) -> None:
        self.err.write(message + "\n")
        self.err.flush()


@dataclass(frozen=True, slots=True)
class LoggerSink:
    """Route events to ``logger.info`` and failures to ``logger.error``."""

    logger: logging.Logger

    def write_event(self, line: str) -> None:
        self.logger.info("%s", line)

    def write_failure(self, message: str) -> None:
        self.logger.error("%s", message)


def emit_event(event: CefEvent, sink: CefSink | None = None) -> bool:
    """Encode ``event`` and hand the outcome to ``sink``.

    Returns True when the event was encoded and written, False when encoding
    failed and a failure notice was written instead. Errors raised by the sink
    itself propagate to the caller.
    """
    sink = sink or StreamSink()
    try:
        line = encode(event)
    except CefError as exc:
        logger.debug("CEF encode failed: %s", exc)
        sink.write_failure(FAILURE_MESSAGE)
        return False

    sink.write_event(line)
    return True
