"""Response headers relevant to conditional fetches."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


class ResponseHeaders(BaseModel):
    """Immutable snapshot of the ``Date`` / ``Last-Modified`` headers.

    ``last_modified`` is ``None`` when the server didn't send one.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime
    last_modified: datetime | None = None

    @classmethod
    def from_http(cls, headers: Mapping[str, str]) -> ResponseHeaders:
        """Parse raw HTTP header values (header names are case-insensitive).

        An unparseable ``Last-Modified`` counts as unset; a missing or
        unparseable ``Date`` falls back to the current UTC time.
        """
        lowered = {key.lower(): value for key, value in headers.items()}
        date = _parse_http_date(lowered.get("date"))
        return cls(
            date=date or datetime.now(timezone.utc),
            last_modified=_parse_http_date(lowered.get("last-modified")),
        )


@runtime_checkable
class HasResponseHeaders(Protocol):
    """A connection-like object that remembers its last response headers."""

    @property
    def last_response_headers(self) -> ResponseHeaders: ...


def _parse_http_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
