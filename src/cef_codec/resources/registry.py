"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from cef_codec.core.export import CefEventModel

SAMPLE_LINE = (
    "CEF:0|Cool Vendor|Cool Product|1.0|COOL_THING|Something cool happened.|Unknown|src=127.0.0.1"
)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://cef-codec/help")
    def help_resource() -> str:
        """Return a short description of the wire format and resources."""
        return (
            "CEF line format:\n"
            "  CEF:Version|Device Vendor|Device Product|Device Version|"
            "Device Event Class ID|Name|Severity|key=value key=value\n"
            "Header fields escape \\ | and newline; extension fields escape \\ = and newline.\n"
            "Extension pairs are emitted sorted by key.\n"
            "\nResources:\n"
            "- app://cef-codec/help\n"
            "- app://cef-codec/schemas/event\n"
            "- app://cef-codec/examples/sample-line\n"
        )

    @mcp.resource("app://cef-codec/examples/sample-line")
    def sample_line() -> str:
        """Return a sample CEF line for demos and tests."""
        return SAMPLE_LINE + "\n"

    @mcp.resource("app://cef-codec/schemas/event")
    def event_schema() -> dict[str, Any]:
        """Return the JSON schema of a structured CEF event."""
        return CefEventModel.model_json_schema(by_alias=True)
