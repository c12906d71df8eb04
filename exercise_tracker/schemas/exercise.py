"""
Request payloads for the exercise data-access layer.

These are validated when constructed, so the repository can trust
their shape. Referential validity (category, exercise and user ids) is
left to the store's foreign keys.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if not (value.startswith("http://") or value.startswith("https://")):
        raise ValueError("must be an http(s) URL")
    return value


def _validate_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("cannot be blank")
    return value


class _MediaFields(BaseModel):
    """Name plus optional media links shared by exercises and variants."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., max_length=255, description="Display name")
    video: Optional[str] = Field(default=None, max_length=2048, description="Video URL")
    image: Optional[str] = Field(default=None, max_length=2048, description="Image URL")
    category_id: int = Field(..., ge=1, description="Category the row belongs to")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _validate_name(v)

    @field_validator("video", "image")
    @classmethod
    def media_is_url(cls, v: Optional[str]) -> Optional[str]:
        return _validate_url(v)


class CreateExercise(_MediaFields):
    """
    Create an exercise.

    Attributes:
        user_id: Owner; leave empty to create a shared exercise
    """

    user_id: Optional[str] = Field(default=None, description="Owning user, None for shared")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Squat",
                "video": "https://videos.example.com/squat.mp4",
                "image": None,
                "category_id": 1,
                "user_id": None,
            }
        },
    )


class CreateVariant(_MediaFields):
    """Create a user's variant of an existing exercise."""

    exercise_id: int = Field(..., ge=1, description="Exercise being customized")
    user_id: str = Field(..., min_length=1, description="Owning user")


class UpdateVariant(_MediaFields):
    """
    Overwrite every mutable column of a variant.

    Omitted video/image are written as NULL; this is a full replacement,
    not a patch.
    """

    variant_id: int = Field(..., ge=1, description="Variant to overwrite")
    user_id: str = Field(..., min_length=1, description="Owning user")


class CreateExerciseDescription(BaseModel):
    """Create a free-text description owned by a user."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Description text")
    user_id: str = Field(..., min_length=1, description="Owning user")

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        return _validate_name(v)
