"""openasset-rest — request options for the OpenAsset REST client.

Builds validated pagination, ordering, field-selection, conditional-fetch
and filter parameters. No HTTP I/O happens here.
"""

from __future__ import annotations

from .conditional import NEVER_MODIFIED, ConditionalFetchResolver
from .exceptions import (
    PropertyNotFoundError,
    ReservedParameterError,
    RestClientError,
    ValidationError,
)
from .headers import HasResponseHeaders, ResponseHeaders
from .nouns import BaseNoun, UpdatedMixin, UpdatedNoun
from .options import QueryOptions, RestOptions
from .render import ParameterRenderer
from .sanitize import sanitize_field_name, wrap_filter_by
from .shape import (
    FieldValidator,
    HasResourceShape,
    ResourceShape,
    register_shape,
    resource_shape,
    unregister_shape,
)

__all__ = [
    # Options
    "RestOptions",
    "QueryOptions",
    "ParameterRenderer",
    # Shapes
    "ResourceShape",
    "HasResourceShape",
    "FieldValidator",
    "register_shape",
    "unregister_shape",
    "resource_shape",
    # Nouns
    "BaseNoun",
    "UpdatedMixin",
    "UpdatedNoun",
    # Conditional fetch
    "ConditionalFetchResolver",
    "HasResponseHeaders",
    "NEVER_MODIFIED",
    "ResponseHeaders",
    # Exceptions
    "RestClientError",
    "ValidationError",
    "PropertyNotFoundError",
    "ReservedParameterError",
    # Utilities
    "sanitize_field_name",
    "wrap_filter_by",
]
