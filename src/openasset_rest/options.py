"""
Request options for pagination, ordering, field selection and filtering.

``RestOptions`` collects everything a list request can carry and renders
it into a parameter map or a URL query string for the transport layer.
Field names used for display and ordering are checked against the
serializable shape of the resource type the options are bound to.

An instance is meant to live for a single request; it is not safe for
concurrent mutation from several threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from email.utils import format_datetime
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .conditional import ConditionalFetchResolver, as_utc, is_unset
from .exceptions import ReservedParameterError
from .render import ParameterRenderer, stringify_value
from .sanitize import sanitize_field_name, wrap_filter_by
from .shape import FieldValidator

logger = logging.getLogger("openasset_rest.options")

T = TypeVar("T")

ASCENDING = "Asc"
DESCENDING = "Desc"


class RestOptions(Generic[T]):
    """
    Mutable builder for REST request parameters.

    Usage::

        options = RestOptions(File, limit=50)
        options.add_display_field("id")
        options.add_order_by("created", ascending=False)
        options.set_filter_by("keyword_id", "2134")
        options.get_url_parameters()
        # 'limit=50&offset=0&displayFields=id&orderBy=createdDesc&filterBy[keyword_id]=2134'
    """

    def __init__(
        self,
        resource_type: type[T],
        *,
        limit: int = 0,
        offset: int = 0,
        if_modified_since: datetime | None = None,
        renderer: ParameterRenderer | None = None,
    ) -> None:
        """
        Args:
            resource_type: Noun type whose shape validates field names.
            limit: Page size; negative values clamp to 0.
            offset: Number of results to skip; negative values clamp to 0.
            if_modified_since: Initial conditional-fetch timestamp.
            renderer: Custom renderer (e.g. with different key names).
        """
        self.resource_type = resource_type
        self._validator = FieldValidator.for_resource(resource_type)
        self._renderer = renderer or ParameterRenderer()
        self._resolver = ConditionalFetchResolver()
        self._limit = 0
        self._offset = 0
        self._if_modified_since: datetime | None = None
        self._display_fields: list[str] = []
        self._order_by: list[str] = []
        self._filters: dict[str, str] = {}

        self.limit = limit
        self.offset = offset
        self.if_modified_since = if_modified_since

    # -- Pagination ---------------------------------------------------------

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        self._limit = _non_negative("limit", value)

    @property
    def offset(self) -> int:
        return self._offset

    @offset.setter
    def offset(self, value: int) -> None:
        self._offset = _non_negative("offset", value)

    # -- Conditional fetch --------------------------------------------------

    @property
    def if_modified_since(self) -> datetime | None:
        return self._if_modified_since

    @if_modified_since.setter
    def if_modified_since(self, value: datetime | None) -> None:
        self._if_modified_since = as_utc(value) if value is not None else None

    def set_last_modified(self, source: Any) -> None:
        """
        Derive ``if_modified_since`` from a previous response.

        *source* may be a ``ResponseHeaders``, a connection exposing
        ``last_response_headers`` or an iterable of nouns.
        """
        self.if_modified_since = self._resolver.resolve(source)
        logger.debug("if_modified_since resolved to %s", self._if_modified_since)

    def set_last_modified_from_nouns(self, nouns: Iterable[Any]) -> None:
        self.if_modified_since = self._resolver.from_nouns(nouns)

    def conditional_headers(self) -> dict[str, str]:
        """Return the ``If-Modified-Since`` header, if a timestamp is set."""
        since = self._if_modified_since
        if since is None or is_unset(since):
            return {}
        moment = since.astimezone(timezone.utc)
        return {"If-Modified-Since": format_datetime(moment, usegmt=True)}

    # -- Ordering -----------------------------------------------------------

    def add_order_by(self, field: str, ascending: bool = True) -> None:
        """Append an ordering directive; raises ``PropertyNotFoundError``."""
        field = sanitize_field_name(field)
        self._validator.validate(field)
        directive = field + (ASCENDING if ascending else DESCENDING)
        self._order_by.append(directive)
        logger.debug("Added order by %s", directive)

    def remove_order_by(self, field: str) -> bool:
        """Remove the first directive for *field*, whichever its direction."""
        field = sanitize_field_name(field)
        for directive in (field + ASCENDING, field + DESCENDING):
            if directive in self._order_by:
                self._order_by.remove(directive)
                logger.debug("Removed order by %s", directive)
                return True
        return False

    def get_order_by(self) -> tuple[str, ...]:
        return tuple(self._order_by)

    def clear_order_by(self) -> None:
        self._order_by.clear()

    # -- Display fields -----------------------------------------------------

    def add_display_field(self, field: str) -> None:
        """Append a display field; raises ``PropertyNotFoundError``."""
        field = sanitize_field_name(field)
        self._validator.validate(field)
        self._display_fields.append(field)
        logger.debug("Added display field %s", field)

    def remove_display_field(self, field: str) -> bool:
        field = sanitize_field_name(field)
        if field in self._display_fields:
            self._display_fields.remove(field)
            return True
        return False

    def get_display_fields(self) -> tuple[str, ...]:
        return tuple(self._display_fields)

    def clear_display_fields(self) -> None:
        self._display_fields.clear()

    # -- Search parameters --------------------------------------------------

    def set_filter(self, parameter: str, value: Any) -> None:
        """
        Set a plain search parameter, overwriting any previous value.

        The name is sanitized but not validated against the resource shape.

        Raises:
            ReservedParameterError: the name is one of the parameters
                rendered from dedicated state (``limit``, ``orderBy``, ...).
        """
        parameter = sanitize_field_name(parameter)
        reserved = self._renderer.reserved_keys
        if parameter in reserved:
            raise ReservedParameterError(parameter, reserved)
        self._filters[parameter] = stringify_value(value)
        logger.debug("Set filter %s", parameter)

    def remove_filter(self, parameter: str) -> None:
        self._filters.pop(sanitize_field_name(parameter), None)

    def get_filter(self, parameter: str) -> str:
        return self._filters.get(sanitize_field_name(parameter), "")

    # -- filterBy parameters ------------------------------------------------

    def set_filter_by(self, parameter: str, value: Any) -> None:
        """Set ``filterBy[<parameter>]``; *parameter* is used verbatim."""
        key = wrap_filter_by(parameter)
        self._filters[key] = stringify_value(value)
        logger.debug("Set filter %s", key)

    def remove_filter_by(self, parameter: str) -> None:
        self._filters.pop(wrap_filter_by(parameter), None)

    def get_filter_by(self, parameter: str) -> str:
        return self._filters.get(wrap_filter_by(parameter), "")

    def get_filters(self) -> MappingProxyType[str, str]:
        """Read-only view of every filter entry, in insertion order."""
        return MappingProxyType(self._filters)

    # -- Rendering ----------------------------------------------------------

    def get_post_parameters(self) -> dict[str, Any]:
        return self._renderer.to_parameter_map(self)

    def get_url_parameters(self) -> str:
        return self._renderer.to_url_query_string(self.get_post_parameters())

    # -- Copying ------------------------------------------------------------

    def copy(self) -> RestOptions[T]:
        """Return an independent copy bound to the same resource type."""
        clone: RestOptions[T] = RestOptions(
            self.resource_type,
            limit=self._limit,
            offset=self._offset,
            if_modified_since=self._if_modified_since,
            renderer=self._renderer,
        )
        clone._display_fields = list(self._display_fields)
        clone._order_by = list(self._order_by)
        clone._filters = dict(self._filters)
        return clone

    def next_page(self) -> RestOptions[T]:
        """Return a copy advanced by one page (``offset += limit``)."""
        clone = self.copy()
        clone.offset = self._offset + self._limit
        return clone

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.resource_type.__name__}, "
            f"limit={self._limit}, offset={self._offset}, "
            f"display_fields={self._display_fields!r}, "
            f"order_by={self._order_by!r}, filters={self._filters!r}, "
            f"if_modified_since={self._if_modified_since!r})"
        )


QueryOptions = RestOptions


def _non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return max(value, 0)
