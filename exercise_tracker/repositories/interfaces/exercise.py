"""
Exercise Repository Interface (IExerciseRepository)

Abstract base class defining the contract for exercise data access.

Implementation guide:
- All methods must be async
- Variant rows are only ever joined for the requesting user
- Failures surface as CustomError; an existing CustomError propagates unchanged
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from exercise_tracker.entities.exercise import (
    Exercise,
    ExerciseCategory,
    ExerciseDescription,
    ExercisePage,
    Variant,
)
from exercise_tracker.schemas.exercise import (
    CreateExercise,
    CreateExerciseDescription,
    CreateVariant,
    UpdateVariant,
)


class IExerciseRepository(ABC):
    """
    Abstract interface for exercise, variant, category and description storage.
    """

    @abstractmethod
    async def create_exercise(self, create_exercise: CreateExercise) -> Exercise:
        """
        Insert an exercise and return it with its category.

        Raises:
            CustomError: internal error if the row could not be created
        """
        pass

    @abstractmethod
    async def create_variant(self, create_variant: CreateVariant) -> Variant:
        """
        Insert a user's variant of an exercise and return it with its category.

        Raises:
            CustomError: internal error if the row could not be created
        """
        pass

    @abstractmethod
    async def create_exercise_description(
        self,
        create_description: CreateExerciseDescription
    ) -> ExerciseDescription:
        """
        Insert a description owned by a user.

        Raises:
            CustomError: internal error if the row could not be created
        """
        pass

    @abstractmethod
    async def read_exercises(
        self,
        user_id: str,
        name: Optional[str] = None,
        category_id: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ExercisePage:
        """
        List exercises visible to `user_id`, one page at a time.

        Visible means shared (no owner) or owned by `user_id`. Each
        exercise carries the caller's own variant when one exists.

        Args:
            user_id: Requesting user
            name: Case-insensitive substring of the exercise or variant name
            category_id: Exact category filter
            page: 1-based page number (default 1)
            page_size: Rows per page (default 10)

        Returns:
            ExercisePage with the page of exercises and the filtered total

        Raises:
            CustomError: bad request for invalid paging, internal error otherwise
        """
        pass

    @abstractmethod
    async def read_exercises_categories(self) -> List[ExerciseCategory]:
        """Return every category."""
        pass

    @abstractmethod
    async def read_exercises_descriptions(self, user_id: str) -> List[ExerciseDescription]:
        """Return the descriptions owned by `user_id`."""
        pass

    @abstractmethod
    async def update_variant(self, update_variant: UpdateVariant) -> Variant:
        """
        Overwrite all mutable columns of a variant.

        Raises:
            CustomError: internal error if the variant does not exist
        """
        pass
