"""Structured-data projection of CEF events (JSON / dict)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .codec import validate
from .models import CefEvent


class CefEventModel(BaseModel):
    """JSON shape of a CEF event, keyed by the CEF header names."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    version: int = Field(
        default=0,
        alias="Version",
        ge=0,
        description="The version of the CEF specification that the event conforms to.",
    )
    device_vendor: str = Field(default="", alias="DeviceVendor", description="The name of the device vendor.")
    device_product: str = Field(default="", alias="DeviceProduct", description="The name of the device product.")
    device_version: str = Field(default="", alias="DeviceVersion", description="The version of the device product.")
    device_event_class_id: str = Field(
        default="",
        alias="DeviceEventClassId",
        description="The ID of the event class that the event conforms to.",
    )
    name: str = Field(default="", alias="Name", description="The name of the event.")
    severity: str = Field(default="", alias="Severity", description="The severity of the event.")
    extensions: dict[str, str] = Field(
        default_factory=dict,
        alias="Extensions",
        description="Additional extensions to the CEF message.",
    )

    @classmethod
    def from_event(cls, event: CefEvent) -> CefEventModel:
        return cls(
            version=event.version,
            device_vendor=event.device_vendor,
            device_product=event.device_product,
            device_version=event.device_version,
            device_event_class_id=event.device_event_class_id,
            name=event.name,
            severity=event.severity,
            extensions=dict(event.extensions),
        )

    def to_event(self) -> CefEvent:
        return CefEvent(
            version=self.version,
            device_vendor=self.device_vendor,
            device_product=self.device_product,
            device_version=self.device_version,
            device_event_class_id=self.device_event_class_id,
            name=self.name,
            severity=self.severity,
            extensions=dict(self.extensions),
        )


def _exclude_empty_extensions(event: CefEvent) -> set[str] | None:
    return None if event.extensions else {"extensions"}


def to_dict(event: CefEvent) -> dict[str, Any]:
    """Validate ``event`` and return it keyed by CEF header names.

    ``Extensions`` is omitted when the event has none.
    """
    validate(event)
    model = CefEventModel.from_event(event)
    return model.model_dump(by_alias=True, exclude=_exclude_empty_extensions(event))


def to_json(event: CefEvent, *, indent: int | None = None) -> str:
    """Validate ``event`` and serialize it to a JSON string."""
    validate(event)
    model = CefEventModel.from_event(event)
    return model.model_dump_json(
        by_alias=True,
        exclude=_exclude_empty_extensions(event),
        indent=indent,
    )


def from_dict(data: Mapping[str, Any]) -> CefEvent:
    """Build a validated event from a mapping (aliases or attribute names)."""
    event = CefEventModel.model_validate(dict(data)).to_event()
    validate(event)
    return event


def from_json(text: str | bytes) -> CefEvent:
    """Build a validated event from a JSON document."""
    event = CefEventModel.model_validate_json(text).to_event()
    validate(event)
    return event
