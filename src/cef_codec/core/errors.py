"""Errors raised by the CEF codec."""

from __future__ import annotations

from collections.abc import Iterable


class CefError(ValueError):
    """Base error for this package."""


class MissingMandatoryFieldError(CefError):
    """Raised when one or more mandatory header fields are empty."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"not all mandatory CEF fields are set: {', '.join(self.fields)}")


class InvalidVersionError(CefError):
    """Raised when the CEF version is not a non-negative base-10 integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid CEF version: {value!r}")


class NotACefMessageError(CefError):
    """Raised when a line does not start with the ``CEF:`` prefix."""

    def __init__(self, line: str) -> None:
        self.line = line
        preview = line if len(line) <= 80 else line[:77] + "..."
        super().__init__(f"not a valid CEF message: {preview!r}")
