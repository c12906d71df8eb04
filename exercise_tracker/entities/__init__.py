"""Immutable domain entities."""

from exercise_tracker.entities.exercise import (
    Exercise,
    ExerciseCategory,
    ExerciseDescription,
    ExercisePage,
    Variant,
)

__all__ = [
    "Exercise",
    "ExerciseCategory",
    "ExerciseDescription",
    "ExercisePage",
    "Variant",
]
