"""CEF codec core: record type, escaping, encode/decode and collaborators."""

from __future__ import annotations

from .codec import build, decode, encode, format_extensions, missing_fields, parse_extension, validate
from .errors import CefError, InvalidVersionError, MissingMandatoryFieldError, NotACefMessageError
from .escaping import escape_extension_field, escape_header_field
from .export import CefEventModel, from_dict, from_json, to_dict, to_json
from .models import CEF_PREFIX, MANDATORY_FIELDS, CefEvent
from .reader import DecodedLine, iter_events, read_events
from .sink import FAILURE_MESSAGE, CefSink, LoggerSink, StreamSink, emit_event

__all__ = [
    "CEF_PREFIX",
    "FAILURE_MESSAGE",
    "MANDATORY_FIELDS",
    "CefError",
    "CefEvent",
    "CefEventModel",
    "CefSink",
    "DecodedLine",
    "InvalidVersionError",
    "LoggerSink",
    "MissingMandatoryFieldError",
    "NotACefMessageError",
    "StreamSink",
    "build",
    "decode",
    "emit_event",
    "encode",
    "escape_extension_field",
    "escape_header_field",
    "format_extensions",
    "from_dict",
    "from_json",
    "iter_events",
    "missing_fields",
    "parse_extension",
    "read_events",
    "to_dict",
    "to_json",
    "validate",
]
