"""
Filter specification for exercise listings.

`ExerciseFilter` holds the validated listing parameters and
`build_exercise_conditions` turns it into SQLAlchemy clauses without
touching the database, so the count query and the page query share
exactly the same predicates.
"""

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from exercise_tracker.core.config import settings
from exercise_tracker.core.errors import CustomError
from exercise_tracker.models.exercise import ExerciseModel, VariantModel

DEFAULT_PAGE = 1


@dataclass(frozen=True)
class ExerciseFilter:
    """
    Listing parameters for `read_exercises`.

    Attributes:
        user_id: Requesting user; drives visibility and the variant join
        name: Case-insensitive substring matched against exercise or variant name
        category_id: Exact category match
        page: 1-based page number
        page_size: Rows per page
    """

    user_id: str
    name: Optional[str] = None
    category_id: Optional[int] = None
    page: int = DEFAULT_PAGE
    page_size: int = 10

    @classmethod
    def from_params(
        cls,
        user_id: str,
        name: Optional[str] = None,
        category_id: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> "ExerciseFilter":
        """
        Apply defaults and validate raw listing parameters.

        A blank or whitespace-only name means no text filter; any other
        name is matched exactly as given, surrounding spaces included.

        Raises:
            CustomError: internal error if page or page_size is below 1
        """
        page = DEFAULT_PAGE if page is None else page
        page_size = settings.default_page_size if page_size is None else page_size

        if page < 1:
            raise CustomError.internal_server("page must be greater than or equal to 1")
        if page_size < 1:
            raise CustomError.internal_server("page_size must be greater than or equal to 1")

        if name is not None and not name.strip():
            name = None

        return cls(
            user_id=user_id,
            name=name,
            category_id=category_id,
            page=page,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def visibility_condition(user_id: str) -> ColumnElement[bool]:
    """Shared exercises (no owner) plus the ones `user_id` owns."""
    return or_(
        ExerciseModel.user_id.is_(None),
        ExerciseModel.user_id == user_id,
    )


def variant_join_condition(user_id: str) -> ColumnElement[bool]:
    """ON clause attaching the requesting user's own variant to an exercise."""
    return and_(
        VariantModel.exercise_id == ExerciseModel.id,
        VariantModel.user_id == user_id,
    )


def build_exercise_conditions(spec: ExerciseFilter) -> List[ColumnElement[bool]]:
    """
    Build the WHERE clauses for an exercise listing.

    The name clause references `variants`, so any query using these
    conditions must left-join variants with `variant_join_condition`.

    Args:
        spec: Validated listing parameters

    Returns:
        Clauses to be combined with AND; visibility is always first
    """
    conditions: List[ColumnElement[bool]] = [visibility_condition(spec.user_id)]

    if spec.name:
        conditions.append(
            or_(
                ExerciseModel.name.icontains(spec.name, autoescape=True),
                VariantModel.name.icontains(spec.name, autoescape=True),
            )
        )

    if spec.category_id is not None:
        conditions.append(ExerciseModel.category_id == spec.category_id)

    return conditions
