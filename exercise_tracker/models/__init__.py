"""
SQLAlchemy ORM models for the exercise tracker.

This module exports all database models and the declarative base.
Import models from this module to ensure they're registered with SQLAlchemy.
"""

from exercise_tracker.models.base import Base, TimestampMixin, UUIDMixin, ModelMixin
from exercise_tracker.models.user import User
from exercise_tracker.models.exercise import (
    ExerciseCategoryModel,
    ExerciseModel,
    VariantModel,
    ExerciseDescriptionModel,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "ModelMixin",
    # Models
    "User",
    "ExerciseCategoryModel",
    "ExerciseModel",
    "VariantModel",
    "ExerciseDescriptionModel",
]
