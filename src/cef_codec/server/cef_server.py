"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: encode, decode and escape CEF data
- Resources: help text, the event JSON schema and a sample line

Run locally (stdio):
    python -m cef_codec.server.cef_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from cef_codec.resources.registry import register_resources
from cef_codec.settings import configure_logging
from cef_codec.tools.codec import (
    decode_file_impl,
    decode_line_impl,
    encode_event_impl,
    escape_field_impl,
)

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("cef-codec", json_response=True)

register_resources(mcp)


@mcp.tool()
def encode_event(
    device_vendor: str,
    device_product: str,
    device_version: str,
    device_event_class_id: str,
    name: str,
    severity: str,
    version: int = 0,
    extensions: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Encode raw event fields into a single CEF line.

    Parameters
    ----------
    device_vendor/device_product/device_version/device_event_class_id/name/severity:
        Mandatory header fields, given unescaped. All must be non-empty.
    version:
        CEF version (non-negative integer, default 0).
    extensions:
        Extension key/value pairs, given unescaped. Emitted sorted by key.

    Returns
    -------
    dict:
        {"line": str}
    """
    return encode_event_impl(
        version=version,
        device_vendor=device_vendor,
        device_product=device_product,
        device_version=device_version,
        device_event_class_id=device_event_class_id,
        name=name,
        severity=severity,
        extensions=extensions,
    )


@mcp.tool()
def decode_line(line: str) -> dict[str, Any]:
    """Decode a CEF line into structured fields.

    Returned fields are in escaped form, so they can be re-emitted verbatim.

    Returns
    -------
    dict:
        {"event": {"Version": int, "DeviceVendor": str, ..., "Extensions": dict}}
    """
    return decode_line_impl(line=line)


@mcp.tool()
async def decode_file(
    path: str,
    limit: int | None = None,
    include_raw: bool = False,
    errors_only: bool = False,
) -> dict[str, Any]:
    """Decode every line of a CEF file (plain text or .gz).

    Parameters
    ----------
    path:
        File path, resolved under CEF_CODEC_BASE_DIR.
    limit:
        Maximum number of lines returned (hard-capped in the implementation).
    include_raw:
        Whether to include the original line with each result.
    errors_only:
        When true, only lines that failed to decode are returned.

    Returns
    -------
    dict:
        {"count": int, "decoded": int, "failed": int, "lines": list[dict]}
    """
    return await decode_file_impl(
        path=path,
        limit=limit,
        include_raw=include_raw,
        errors_only=errors_only,
    )


@mcp.tool()
def escape_field(value: str, kind: str = "header") -> dict[str, Any]:
    """Escape a single value with the header or extension rules.

    Returns
    -------
    dict:
        {"kind": "header" | "extension", "escaped": str}
    """
    return escape_field_impl(value=value, kind=kind)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
