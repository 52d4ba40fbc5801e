"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cef_codec.core.codec import decode, encode
from cef_codec.core.escaping import escape_extension_field, escape_header_field
from cef_codec.core.export import to_dict
from cef_codec.core.models import CefEvent
from cef_codec.core.reader import DecodedLine, read_events
from cef_codec.settings import base_dir, text_encoding

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000
ESCAPE_KINDS = ("header", "extension")


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _line_to_dict(item: DecodedLine, *, include_raw: bool) -> dict[str, Any]:
    """Convert a DecodedLine into a JSON-serializable dict."""
    d: dict[str, Any] = {"line_no": item.line_no}
    if item.event is not None:
        d["event"] = to_dict(item.event)
    if item.error is not None:
        d["error"] = str(item.error)
        d["error_type"] = type(item.error).__name__
    if include_raw and item.raw is not None:
        d["raw"] = item.raw
    return d


def encode_event_impl(
    *,
    device_vendor: str,
    device_product: str,
    device_version: str,
    device_event_class_id: str,
    name: str,
    severity: str,
    version: int = 0,
    extensions: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Implementation for the `encode_event` MCP tool."""
    event = CefEvent(
        version=version,
        device_vendor=device_vendor,
        device_product=device_product,
        device_version=device_version,
        device_event_class_id=device_event_class_id,
        name=name,
        severity=severity,
        extensions=dict(extensions or {}),
    )
    return {"line": encode(event)}


def decode_line_impl(*, line: str) -> dict[str, Any]:
    """Implementation for the `decode_line` MCP tool.

    The returned fields are escaped text; see core.codec.
    """
    return {"event": to_dict(decode(line))}


def escape_field_impl(*, value: str, kind: str = "header") -> dict[str, Any]:
    """Implementation for the `escape_field` MCP tool."""
    kind_norm = kind.strip().lower()
    if kind_norm == "header":
        return {"kind": kind_norm, "escaped": escape_header_field(value)}
    if kind_norm == "extension":
        return {"kind": kind_norm, "escaped": escape_extension_field(value)}
    raise ValueError(f"Unknown kind '{kind}'. Valid values: {', '.join(ESCAPE_KINDS)}.")


async def decode_file_impl(
    *,
    path: str,
    limit: int | None = None,
    include_raw: bool = False,
    errors_only: bool = False,
) -> dict[str, Any]:
    """Implementation for the `decode_file` MCP tool.

    Notes
    -----
    - `path` is resolved under CEF_CODEC_BASE_DIR and may not escape it.
    - `limit` caps the number of returned lines (hard-capped at HARD_LIMIT);
      the counters always cover the whole file.
    - `errors_only` returns only the lines that failed to decode.
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    if limit > HARD_LIMIT:
        limit = HARD_LIMIT

    resolved = _safe_resolve(path)
    items = await read_events(resolved, encoding=text_encoding(), include_raw=include_raw)

    decoded = sum(1 for item in items if item.ok)
    selected = [item for item in items if not item.ok] if errors_only else items

    return {
        "count": len(items),
        "decoded": decoded,
        "failed": len(items) - decoded,
        "lines": [_line_to_dict(item, include_raw=include_raw) for item in selected[:limit]],
    }
