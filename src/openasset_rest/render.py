"""ParameterRenderer — request options -> parameter map / URL query string."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote_plus

if TYPE_CHECKING:
    from .options import RestOptions


class ParameterRenderer:
    """Render request options for the transport layer."""

    def __init__(
        self,
        *,
        limit_key: str = "limit",
        offset_key: str = "offset",
        display_fields_key: str = "displayFields",
        order_by_key: str = "orderBy",
    ) -> None:
        self.limit_key = limit_key
        self.offset_key = offset_key
        self.display_fields_key = display_fields_key
        self.order_by_key = order_by_key

    @property
    def reserved_keys(self) -> frozenset[str]:
        """Keys rendered from dedicated state, never from filters."""
        return frozenset(
            {
                self.limit_key,
                self.offset_key,
                self.display_fields_key,
                self.order_by_key,
            }
        )

    def to_parameter_map(self, options: RestOptions[Any]) -> dict[str, Any]:
        """
        Build the ordered POST-style parameter map.

        ``limit`` and ``offset`` are always present; display fields and
        ordering only when non-empty; filters follow in insertion order.
        """
        params: dict[str, Any] = {
            self.limit_key: options.limit,
            self.offset_key: options.offset,
        }
        display_fields = options.get_display_fields()
        if display_fields:
            params[self.display_fields_key] = ",".join(display_fields)
        order_by = options.get_order_by()
        if order_by:
            params[self.order_by_key] = ",".join(order_by)
        params.update(options.get_filters())
        return params

    @staticmethod
    def to_url_query_string(parameters: Mapping[str, Any]) -> str:
        """Render ``key=value`` pairs joined by ``&``.

        Keys are emitted verbatim so ``filterBy[...]`` survives; values are
        form-encoded (a space becomes ``+``).
        """
        return "&".join(
            f"{key}={quote_plus(stringify_value(value))}"
            for key, value in parameters.items()
        )


def stringify_value(value: Any) -> str:
    """Render a parameter value the way the server expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
