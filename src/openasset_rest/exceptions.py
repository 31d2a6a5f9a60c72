"""
Request-options exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``RestClientError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

EXCEPTION_PROPERTY_NOT_EXISTS = "Property does not exist on noun"


class RestClientError(Exception):
    """Base exception for all REST client errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(RestClientError):
    """A request parameter failed local validation."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class PropertyNotFoundError(ValidationError):
    """
    Field name is not a serializable member of the resource.

    Raised by the ordering and display-field mutators. The rejected name is
    the already-sanitized one, so it matches what would have been sent.

    Example error message::

        Property does not exist on noun 'File' [nme].
        Did you mean: name?
    """

    def __init__(
        self,
        field: str,
        resource: str,
        available_fields: list[str] | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.field = field
        self.resource = resource
        self.available_fields = sorted(available_fields or [])
        self.suggestions = get_close_matches(
            field, self.available_fields, n=3, cutoff=cutoff
        )

        message = f"{EXCEPTION_PROPERTY_NOT_EXISTS} '{resource}' [{field}]."
        if self.suggestions:
            message += f"\nDid you mean: {', '.join(self.suggestions)}?"
        super().__init__(message, path=field)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PROPERTY_NOT_FOUND",
            "field": self.field,
            "resource": self.resource,
            "suggestions": self.suggestions,
            "available_fields": self.available_fields,
        }


class ReservedParameterError(ValidationError):
    """
    Filter key collides with a parameter the builder renders itself.

    ``limit``, ``offset``, ``displayFields`` and ``orderBy`` are owned by
    their dedicated setters and can't be overwritten through ``set_filter``.
    """

    def __init__(self, parameter: str, reserved: frozenset[str]) -> None:
        self.parameter = parameter
        self.reserved = reserved
        message = (
            f"Parameter {parameter!r} is reserved; "
            f"reserved parameters: {', '.join(sorted(reserved))}"
        )
        super().__init__(message, path=parameter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RESERVED_PARAMETER",
            "parameter": self.parameter,
            "reserved": sorted(self.reserved),
        }
