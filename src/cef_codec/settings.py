"""Environment-driven settings shared by the server and the CLI."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_LEVEL_ENV = "CEF_CODEC_LOG_LEVEL"
BASE_DIR_ENV = "CEF_CODEC_BASE_DIR"
ENCODING_ENV = "CEF_CODEC_ENCODING"

DEFAULT_ENCODING = "utf-8"


def configure_logging(level_name: str | None = None) -> None:
    """Configure a reasonable default logging setup.

    Logs go to stderr; stdout is reserved for the stdio transport and CEF output.
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    level = getattr(logging, name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def base_dir() -> Path:
    """Return the resolved base directory for file access."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def text_encoding() -> str:
    """Return the text encoding used when reading CEF files."""
    return os.getenv(ENCODING_ENV) or DEFAULT_ENCODING
