"""Validated request payloads."""

from exercise_tracker.schemas.exercise import (
    CreateExercise,
    CreateExerciseDescription,
    CreateVariant,
    UpdateVariant,
)

__all__ = [
    "CreateExercise",
    "CreateExerciseDescription",
    "CreateVariant",
    "UpdateVariant",
]
