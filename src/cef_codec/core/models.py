"""Core data model for CEF events."""

from __future__ import annotations

from dataclasses import dataclass, field

CEF_PREFIX = "CEF:"

# Header order on the wire, after the prefix. The extension segment follows.
MANDATORY_FIELDS: tuple[str, ...] = (
    "version",
    "device_vendor",
    "device_product",
    "device_version",
    "device_event_class_id",
    "name",
    "severity",
)


@dataclass(frozen=True, slots=True)
class CefEvent:
    """A single Common Event Format record.

    Header fields hold text exactly as given; escaping happens in the codec.
    ``version`` defaults to 0, the first CEF revision, and only counts as
    missing when explicitly set to ``None``.
    """

    version: int | None = 0
    device_vendor: str = ""
    device_product: str = ""
    device_version: str = ""
    device_event_class_id: str = ""
    name: str = ""
    severity: str = ""
    # Excluded from the hash; equality still compares it.
    extensions: dict[str, str] = field(default_factory=dict, hash=False)

    def header_values(self) -> tuple[str, str, str, str, str, str]:
        """Return the six string header fields in wire order."""
        return (
            self.device_vendor,
            self.device_product,
            self.device_version,
            self.device_event_class_id,
            self.name,
            self.severity,
        )
