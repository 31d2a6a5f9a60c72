"""Field-name sanitizing shared by ordering, display fields and filters."""

from __future__ import annotations

import re

_UNSAFE_RE = re.compile(r"[^A-Za-z_,]")

FILTER_BY_TEMPLATE = "filterBy[{}]"


def sanitize_field_name(raw: str) -> str:
    """
    Replace every character outside ``[A-Za-z_,]`` with ``_``.

    Total and idempotent; the result always has the same length as *raw*.
    """
    return _UNSAFE_RE.sub("_", raw)


def wrap_filter_by(parameter: str) -> str:
    """Return the ``filterBy[<parameter>]`` key; *parameter* is used verbatim."""
    return FILTER_BY_TEMPLATE.format(parameter)
