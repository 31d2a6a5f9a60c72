"""
Resource shapes: the serializable member names of a resource type.

A shape is the validation universe for display fields and ordering.
Shapes are resolved once per type, either from an explicit registration,
from the type itself (``HasResourceShape``) or by introspecting a
pydantic model's fields and their serialization aliases.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from .exceptions import PropertyNotFoundError

logger = logging.getLogger("openasset_rest.shape")


@dataclass(frozen=True)
class ResourceShape:
    """Immutable set of a resource's serializable member names."""

    resource: str
    fields: frozenset[str]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.fields))

    def __len__(self) -> int:
        return len(self.fields)


@runtime_checkable
class HasResourceShape(Protocol):
    """A resource type that can describe its own serializable shape."""

    @classmethod
    def resource_shape(cls) -> ResourceShape: ...


_registry: dict[type[Any], ResourceShape] = {}


def register_shape(
    resource_type: type[Any],
    fields: Iterable[str],
    *,
    resource: str | None = None,
) -> ResourceShape:
    """
    Statically register the shape of *resource_type*.

    Registered shapes take precedence over introspection, which makes this
    the way to describe types that are not pydantic models.
    """
    shape = ResourceShape(resource or resource_type.__name__, frozenset(fields))
    _registry[resource_type] = shape
    logger.debug("Registered shape for %s: %d fields", shape.resource, len(shape))
    return shape


def unregister_shape(resource_type: type[Any]) -> None:
    _registry.pop(resource_type, None)


@lru_cache(maxsize=None)
def shape_from_model(model: type[BaseModel]) -> ResourceShape:
    """
    Build a shape from a pydantic model's declared fields.

    Each field contributes its serialization alias, then its alias, then
    its attribute name. Computed fields are included; fields declared with
    ``exclude=True`` never serialize and are left out.
    """
    names: set[str] = set()
    for name, info in model.model_fields.items():
        if info.exclude:
            continue
        names.add(info.serialization_alias or info.alias or name)
    for name, computed in model.model_computed_fields.items():
        names.add(computed.alias or name)
    logger.debug("Introspected shape for %s: %s", model.__name__, sorted(names))
    return ResourceShape(model.__name__, frozenset(names))


def resource_shape(resource_type: type[Any]) -> ResourceShape:
    """Return the shape of *resource_type*.

    Raises:
        TypeError: the type is neither registered, nor shape-aware,
            nor a pydantic model.
    """
    registered = _registry.get(resource_type)
    if registered is not None:
        return registered
    if isinstance(resource_type, type):
        if isinstance(resource_type, HasResourceShape):
            return resource_type.resource_shape()
        if issubclass(resource_type, BaseModel):
            return shape_from_model(resource_type)
    raise TypeError(
        f"Cannot determine the resource shape of {resource_type!r}: "
        "register it with register_shape() or use a pydantic model"
    )


class FieldValidator:
    """Checks field names against a resource shape."""

    def __init__(self, shape: ResourceShape) -> None:
        self.shape = shape

    @classmethod
    def for_resource(cls, resource_type: type[Any]) -> FieldValidator:
        return cls(resource_shape(resource_type))

    def is_valid(self, name: str) -> bool:
        return name in self.shape

    def validate(self, name: str) -> None:
        """Raise ``PropertyNotFoundError`` if *name* is not in the shape."""
        if name not in self.shape:
            logger.warning(
                "Rejected field %r: not a property of %s", name, self.shape.resource
            )
            raise PropertyNotFoundError(
                name, self.shape.resource, list(self.shape.fields)
            )
