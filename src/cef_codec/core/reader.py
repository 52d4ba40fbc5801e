"""Read and decode CEF lines from files (plain text or .gz)."""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .codec import decode
from .errors import CefError
from .models import CefEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedLine:
    """Outcome of decoding one line: exactly one of ``event``/``error`` is set."""

    line_no: int
    event: CefEvent | None
    error: CefError | None = None
    raw: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


async def iter_events(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
    skip_blank: bool = True,
    include_raw: bool = False,
) -> AsyncIterator[DecodedLine]:
    """Yield one DecodedLine per line of ``path``.

    Lines that fail to decode are reported through ``DecodedLine.error``
    and do not stop iteration.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"File not found: {p}")

    line_no = 0
    async with _open_text(p, encoding=encoding, decode_errors=decode_errors) as f:
        async for line in f:
            line_no += 1
            text = line.rstrip("\r\n")
            if skip_blank and not text.strip():
                continue

            raw = text if include_raw else None
            try:
                event = decode(text)
            except CefError as exc:
                logger.debug("line %s: %s", line_no, exc)
                yield DecodedLine(line_no=line_no, event=None, error=exc, raw=raw)
                continue

            yield DecodedLine(line_no=line_no, event=event, raw=raw)


async def read_events(path: str | Path, **iter_kwargs) -> list[DecodedLine]:
    """Collect iter_events into a list."""
    return [item async for item in iter_events(path, **iter_kwargs)]
