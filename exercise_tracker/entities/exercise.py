"""
Exercise domain entities.

Immutable value objects returned by the data-access layer. Each entity
is built through its `create()` factory, which validates the input and
raises pydantic.ValidationError instead of producing a partial object.
"""

from math import ceil
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    @classmethod
    def create(cls, data: Any = None, **fields: Any):
        """
        Validate `data` (a mapping or an object with attributes) merged
        with keyword overrides and return a new entity.
        """
        if data is None:
            return cls.model_validate(fields)
        if fields:
            if not isinstance(data, dict):
                data = {name: getattr(data, name) for name in cls.model_fields if hasattr(data, name)}
            data = {**data, **fields}
        return cls.model_validate(data)


class ExerciseCategory(_Entity):
    """Category reference data."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)


class Variant(_Entity):
    """A user's customization of an exercise."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    video: Optional[str] = None
    image: Optional[str] = None
    category: ExerciseCategory


class Exercise(_Entity):
    """
    Exercise as seen by a requesting user.

    `variant` is the requesting user's own variant of the exercise when
    one exists. `has_owner` is derived from `user_id`.
    """

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    video: Optional[str] = None
    image: Optional[str] = None
    category: ExerciseCategory
    user_id: Optional[str] = None
    variant: Optional[Variant] = None

    @computed_field
    @property
    def has_owner(self) -> bool:
        return self.user_id is not None


class ExerciseDescription(_Entity):
    """Free-text description owned by a user."""

    id: int = Field(..., ge=1)
    description: str = Field(..., min_length=1)


class ExercisePage(_Entity):
    """One page of an exercise listing plus the unpaginated total."""

    exercises: List[Exercise] = Field(default_factory=list)
    total_items: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)

    @computed_field
    @property
    def total_pages(self) -> int:
        return ceil(self.total_items / self.page_size)
