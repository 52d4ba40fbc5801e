"""Encode and decode CEF lines.

Wire format::

    CEF:Version|Device Vendor|Device Product|Device Version|Device Event Class ID|Name|Severity|Extension

Encoding assumes the record holds raw text and escapes it exactly once.
Decoding splits the raw line and then runs the same escaping pass, so a
decoded record always holds escaped text. Feeding a decoded record back into
``encode`` escapes it a second time.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import replace

from .errors import InvalidVersionError, MissingMandatoryFieldError, NotACefMessageError
from .escaping import escape_extension_field, escape_header_field
from .models import CEF_PREFIX, CefEvent

_VERSION_RE = re.compile(r"[0-9]+")
_HEADER_COUNT = 6


def missing_fields(event: CefEvent) -> list[str]:
    """Return the names of unset mandatory fields, in header order."""
    checks = (
        ("version", event.version is not None),
        ("device_vendor", bool(event.device_vendor)),
        ("device_product", bool(event.device_product)),
        ("device_version", bool(event.device_version)),
        ("device_event_class_id", bool(event.device_event_class_id)),
        ("name", bool(event.name)),
        ("severity", bool(event.severity)),
    )
    return [name for name, ok in checks if not ok]


def validate(event: CefEvent) -> None:
    """Check that every mandatory field is set.

    Raises:
        MissingMandatoryFieldError: if any header field is empty.
        InvalidVersionError: if the version is not a non-negative int.
    """
    missing = missing_fields(event)
    if missing:
        raise MissingMandatoryFieldError(missing)

    version = event.version
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise InvalidVersionError(version)


def _escape_extensions(extensions: Mapping[str, str]) -> dict[str, str]:
    # Last write wins on duplicate escaped keys.
    return {
        escape_extension_field(key): escape_extension_field(value)
        for key, value in extensions.items()
    }


def build(event: CefEvent) -> CefEvent:
    """Return a validated copy of ``event`` with every field escaped."""
    validate(event)
    return replace(
        event,
        device_vendor=escape_header_field(event.device_vendor),
        device_product=escape_header_field(event.device_product),
        device_version=escape_header_field(event.device_version),
        device_event_class_id=escape_header_field(event.device_event_class_id),
        name=escape_header_field(event.name),
        severity=escape_header_field(event.severity),
        extensions=_escape_extensions(event.extensions),
    )


def format_extensions(extensions: Mapping[str, str]) -> str:
    """Render extension pairs as ``key=value`` tokens sorted by key."""
    return " ".join(f"{key}={extensions[key]}" for key in sorted(extensions))


def encode(event: CefEvent) -> str:
    """Encode a raw record into a CEF line."""
    escaped = build(event)
    header = "|".join(escaped.header_values())
    extension = format_extensions(escaped.extensions)
    return f"{CEF_PREFIX}{escaped.version}|{header}|{extension}"


def parse_extension(segment: str) -> dict[str, str]:
    """Split an extension segment into key/value pairs.

    Tokens are separated by single spaces and split on the first ``=``.
    Tokens without ``=`` are dropped; later duplicate keys win.
    """
    fields: dict[str, str] = {}
    for token in segment.split(" "):
        if "=" not in token:
            continue
        key, value = token.split("=", 1)
        fields[key] = value
    return fields


def decode(line: str) -> CefEvent:
    """Decode a CEF line into an escaped, validated record.

    Raises:
        NotACefMessageError: if the line lacks the ``CEF:`` prefix.
        InvalidVersionError: if the version token is not a decimal integer.
        MissingMandatoryFieldError: if any header field is empty or absent.
    """
    text = line.rstrip("\r\n")
    if not text.startswith(CEF_PREFIX):
        raise NotACefMessageError(line)

    parts = text[len(CEF_PREFIX) :].split("|", _HEADER_COUNT + 1)

    version_raw = parts[0]
    if not _VERSION_RE.fullmatch(version_raw):
        raise InvalidVersionError(version_raw)
    try:
        version = int(version_raw)
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit.
        raise InvalidVersionError(version_raw) from e

    header = parts[1 : _HEADER_COUNT + 1]
    header += [""] * (_HEADER_COUNT - len(header))
    extension_raw = parts[_HEADER_COUNT + 1] if len(parts) > _HEADER_COUNT + 1 else ""

    raw = CefEvent(
        version=version,
        device_vendor=header[0],
        device_product=header[1],
        device_version=header[2],
        device_event_class_id=header[3],
        name=header[4],
        severity=header[5],
        extensions=parse_extension(extension_raw),
    )
    # Escaping preserves emptiness, so build() validates the decoded fields.
    return build(raw)
