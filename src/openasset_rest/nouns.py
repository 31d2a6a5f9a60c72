"""Base classes and capabilities for REST resources ("nouns")."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .shape import ResourceShape, shape_from_model


class BaseNoun(BaseModel):
    """Base class for all REST resources.

    The serializable shape of a noun is derived from its fields and their
    serialization aliases, and drives display-field and ordering validation.

    Usage::

        class File(BaseNoun):
            id: int
            original_filename: str = Field(alias="originalFilename")

        File.resource_shape()  # ResourceShape('File', {'id', 'originalFilename'})
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    @classmethod
    def resource_shape(cls) -> ResourceShape:
        return shape_from_model(cls)


@runtime_checkable
class UpdatedNoun(Protocol):
    """A resource that tracks when it was last updated on the server."""

    @property
    def updated(self) -> datetime: ...


class UpdatedMixin(BaseModel):
    """Mixin that adds the server-side ``updated`` timestamp."""

    updated: datetime = Field(
        description="Last time the resource was modified on the server"
    )
