"""
Conditional fetch: computing the ``If-Modified-Since`` timestamp.

The timestamp comes either from the headers of a previous response or
from the newest ``updated`` value in a collection of fetched nouns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from .headers import HasResponseHeaders, ResponseHeaders
from .nouns import UpdatedNoun

logger = logging.getLogger("openasset_rest.conditional")

# Nothing is ever older: "always stale".
NEVER_MODIFIED = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_unset(value: datetime | None) -> bool:
    return value is None or as_utc(value) == NEVER_MODIFIED


class ConditionalFetchResolver:
    """Resolves the ``If-Modified-Since`` value for the next request."""

    def from_headers(self, headers: ResponseHeaders) -> datetime:
        """Use ``Last-Modified`` when the server sent one, else ``Date``."""
        last_modified = headers.last_modified
        if last_modified is not None and not is_unset(last_modified):
            return as_utc(last_modified)
        logger.debug("No Last-Modified header; falling back to Date")
        return as_utc(headers.date)

    def from_nouns(self, nouns: Iterable[Any]) -> datetime:
        """Return the newest ``updated`` timestamp among *nouns*.

        Nouns without the capability are skipped. ``NEVER_MODIFIED`` is
        returned when none of them carries a timestamp.
        """
        latest = NEVER_MODIFIED
        skipped = 0
        for noun in nouns:
            if not isinstance(noun, UpdatedNoun) or not isinstance(
                noun.updated, datetime
            ):
                skipped += 1
                continue
            updated = as_utc(noun.updated)
            if updated > latest:
                latest = updated
        if skipped:
            logger.debug("Skipped %d nouns without an updated timestamp", skipped)
        return latest

    def resolve(self, source: Any) -> datetime:
        """Dispatch on *source*: headers, a connection or an iterable of nouns."""
        if isinstance(source, ResponseHeaders):
            return self.from_headers(source)
        if isinstance(source, HasResponseHeaders):
            return self.from_headers(source.last_response_headers)
        if isinstance(source, Iterable) and not isinstance(source, str | bytes):
            return self.from_nouns(source)
        raise TypeError(
            f"Cannot resolve a last-modified time from {type(source).__name__}"
        )
