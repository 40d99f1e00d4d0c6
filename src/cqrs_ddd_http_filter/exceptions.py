"""
HTTP filter exception hierarchy.

All exceptions inherit from ``HttpFilterError`` and provide ``to_dict()``
plus a ``status_code`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class HttpFilterError(Exception):
    """Base exception for all HTTP filter errors."""

    status_code: int = 400

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidPropertyNameError(HttpFilterError):
    """
    Property path failed the column name grammar.

    Raised the first time a filter or sort path contains characters
    outside ``[A-Za-z0-9_>-]`` or starts with a digit. Aborts ``build()``.
    """

    def __init__(self, property: str) -> None:
        self.property = property
        super().__init__(f"Invalid property name: {property!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PROPERTY_NAME",
            "message": str(self),
            "property": self.property,
        }


class UnknownPropertyError(HttpFilterError):
    """A whitelisted, sanitized path does not resolve to a mapped column."""

    def __init__(self, property: str, model_name: str) -> None:
        self.property = property
        self.model_name = model_name
        super().__init__(f"Property {property!r} is not queryable on '{model_name}'")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_PROPERTY",
            "message": str(self),
            "property": self.property,
            "model": self.model_name,
        }
