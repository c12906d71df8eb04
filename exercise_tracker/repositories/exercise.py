"""
Exercise repository for exercise, variant, category and description access.

Translates validated request payloads into SQL statements and result rows
into immutable entities. Writes execute inside the injected session's
transaction; committing is left to the caller (see core.database.get_db).
"""

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy import and_, distinct, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from exercise_tracker.core.errors import CustomError
from exercise_tracker.core.logging_config import log_with_context
from exercise_tracker.entities.exercise import (
    Exercise,
    ExerciseCategory,
    ExerciseDescription,
    ExercisePage,
    Variant,
)
from exercise_tracker.models.exercise import (
    ExerciseCategoryModel,
    ExerciseDescriptionModel,
    ExerciseModel,
    VariantModel,
)
from exercise_tracker.repositories.filters import (
    ExerciseFilter,
    build_exercise_conditions,
    variant_join_condition,
)
from exercise_tracker.repositories.interfaces.exercise import IExerciseRepository
from exercise_tracker.schemas.exercise import (
    CreateExercise,
    CreateExerciseDescription,
    CreateVariant,
    UpdateVariant,
)

logger = logging.getLogger(__name__)


class ExerciseRepository(IExerciseRepository):
    """
    Repository for exercise data access.

    Every public method either returns an entity or raises CustomError.
    Unexpected failures (constraint violations, connection errors, invalid
    rows) are logged and re-raised as an internal error chained to the
    original exception.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create_exercise(self, create_exercise: CreateExercise) -> Exercise:
        """
        Insert an exercise and return it with its category.

        Args:
            create_exercise: Validated exercise payload

        Returns:
            Created Exercise (no variant, has_owner from user_id)

        Raises:
            CustomError: internal error if the insert fails or returns no row

        Example:
            >>> exercise = await repo.create_exercise(
            ...     CreateExercise(name="Squat", category_id=1)
            ... )
            >>> exercise.has_owner
            False
        """
        try:
            stmt = (
                insert(ExerciseModel)
                .values(**create_exercise.model_dump())
                .returning(
                    ExerciseModel.id,
                    ExerciseModel.name,
                    ExerciseModel.video,
                    ExerciseModel.image,
                    ExerciseModel.category_id,
                    ExerciseModel.user_id,
                )
            )
            result = await self.session.execute(stmt)
            new_exercise = result.mappings().first()

            if new_exercise is None:
                raise CustomError.internal_server("Error creating the exercise")

            category = await self._read_category(new_exercise["category_id"])

            log_with_context(
                logger, "debug", "Exercise created",
                user_id=new_exercise["user_id"],
                operation="create_exercise",
                exercise_id=new_exercise["id"],
            )

            return Exercise.create(
                dict(new_exercise),
                category=category,
                variant=None,
            )
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error("create_exercise", e) from e

    async def create_variant(self, create_variant: CreateVariant) -> Variant:
        """
        Insert a user's variant of an exercise.

        Args:
            create_variant: Validated variant payload

        Returns:
            Created Variant with its category

        Raises:
            CustomError: internal error if the insert fails or returns no row
                (unknown exercise/category, or the user already has a variant
                of this exercise)
        """
        try:
            stmt = (
                insert(VariantModel)
                .values(**create_variant.model_dump())
                .returning(
                    VariantModel.id,
                    VariantModel.name,
                    VariantModel.video,
                    VariantModel.image,
                    VariantModel.category_id,
                )
            )
            result = await self.session.execute(stmt)
            new_variant = result.mappings().first()

            if new_variant is None:
                raise CustomError.internal_server("Error creating the variant")

            category = await self._read_category(new_variant["category_id"])

            log_with_context(
                logger, "debug", "Variant created",
                user_id=create_variant.user_id,
                operation="create_variant",
                variant_id=new_variant["id"],
            )

            return Variant.create(dict(new_variant), category=category)
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error("create_variant", e) from e

    async def create_exercise_description(
        self,
        create_description: CreateExerciseDescription
    ) -> ExerciseDescription:
        """
        Insert a description owned by a user.

        Raises:
            CustomError: internal error if the insert fails or returns no row
        """
        try:
            stmt = (
                insert(ExerciseDescriptionModel)
                .values(**create_description.model_dump())
                .returning(
                    ExerciseDescriptionModel.id,
                    ExerciseDescriptionModel.description,
                )
            )
            result = await self.session.execute(stmt)
            new_description = result.mappings().first()

            if new_description is None:
                raise CustomError.internal_server("Error creating the description")

            return ExerciseDescription.create(dict(new_description))
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error("create_exercise_description", e) from e

    async def read_exercises(
        self,
        user_id: str,
        name: Optional[str] = None,
        category_id: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ExercisePage:
        """
        List exercises visible to a user, one page at a time.

        Two queries share the same joins and WHERE clauses:
        - a count of distinct exercise ids for total_items
        - the page itself, ordered by exercise id

        Both left-join the caller's own variant, so a name filter can
        match either the exercise or that variant. Exercises without a
        variant are still listed with variant=None.

        Args:
            user_id: Requesting user
            name: Case-insensitive substring of exercise or variant name
            category_id: Exact category filter
            page: 1-based page number (default 1)
            page_size: Rows per page (default settings.default_page_size)

        Returns:
            ExercisePage

        Raises:
            CustomError: internal error for page or page_size below 1 and for
                any query failure

        Example:
            >>> result = await repo.read_exercises(user_id, name="squat", page=2, page_size=5)
            >>> result.total_items, len(result.exercises)
            (12, 5)
        """
        try:
            spec = ExerciseFilter.from_params(
                user_id=user_id,
                name=name,
                category_id=category_id,
                page=page,
                page_size=page_size,
            )
            conditions = build_exercise_conditions(spec)

            log_with_context(
                logger, "debug", "Listing exercises",
                user_id=user_id,
                operation="read_exercises",
                name_filter=spec.name,
                category_id=spec.category_id,
                page=spec.page,
                page_size=spec.page_size,
            )

            count_stmt = (
                select(func.count(distinct(ExerciseModel.id)))
                .select_from(ExerciseModel)
                .outerjoin(VariantModel, variant_join_condition(spec.user_id))
                .where(and_(*conditions))
            )
            total_items = (await self.session.execute(count_stmt)).scalar_one()

            variant_category = aliased(ExerciseCategoryModel, name="variant_category")

            page_stmt = (
                select(
                    ExerciseModel.id,
                    ExerciseModel.name,
                    ExerciseModel.video,
                    ExerciseModel.image,
                    ExerciseModel.user_id,
                    ExerciseCategoryModel.id.label("category_id"),
                    ExerciseCategoryModel.name.label("category_name"),
                    VariantModel.id.label("variant_id"),
                    VariantModel.name.label("variant_name"),
                    VariantModel.video.label("variant_video"),
                    VariantModel.image.label("variant_image"),
                    variant_category.id.label("variant_category_id"),
                    variant_category.name.label("variant_category_name"),
                )
                .select_from(ExerciseModel)
                .outerjoin(
                    ExerciseCategoryModel,
                    ExerciseCategoryModel.id == ExerciseModel.category_id,
                )
                .outerjoin(VariantModel, variant_join_condition(spec.user_id))
                .outerjoin(
                    variant_category,
                    variant_category.id == VariantModel.category_id,
                )
                .where(and_(*conditions))
                .order_by(ExerciseModel.id)
                .limit(spec.limit)
                .offset(spec.offset)
            )
            rows = (await self.session.execute(page_stmt)).mappings().all()

            return ExercisePage.create(
                exercises=[self._exercise_from_row(row) for row in rows],
                total_items=total_items,
                page=spec.page,
                page_size=spec.page_size,
            )
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error("read_exercises", e, user_id=user_id) from e

    async def read_exercises_categories(self) -> List[ExerciseCategory]:
        """Return every category, ordered by id."""
        try:
            stmt = (
                select(ExerciseCategoryModel.id, ExerciseCategoryModel.name)
                .order_by(ExerciseCategoryModel.id)
            )
            rows = (await self.session.execute(stmt)).mappings().all()

            return [ExerciseCategory.create(dict(row)) for row in rows]
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error("read_exercises_categories", e) from e

    async def read_exercises_descriptions(self, user_id: str) -> List[ExerciseDescription]:
        """Return the descriptions owned by `user_id`, ordered by id."""
        try:
            stmt = (
                select(ExerciseDescriptionModel.id, ExerciseDescriptionModel.description)
                .where(ExerciseDescriptionModel.user_id == user_id)
                .order_by(ExerciseDescriptionModel.id)
            )
            rows = (await self.session.execute(stmt)).mappings().all()

            return [ExerciseDescription.create(dict(row)) for row in rows]
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error(
                "read_exercises_descriptions", e, user_id=user_id
            ) from e

    async def update_variant(self, update_variant: UpdateVariant) -> Variant:
        """
        Overwrite name, video, image, category and owner of a variant.

        Fields omitted from the payload are written as NULL.

        Args:
            update_variant: Validated payload identifying the variant

        Returns:
            Updated Variant with its category

        Raises:
            CustomError: internal error if no variant has the given id
        """
        try:
            values = update_variant.model_dump(exclude={"variant_id"})

            stmt = (
                update(VariantModel)
                .where(VariantModel.id == update_variant.variant_id)
                .values(**values)
                .returning(
                    VariantModel.id,
                    VariantModel.name,
                    VariantModel.video,
                    VariantModel.image,
                    VariantModel.category_id,
                )
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            updated_variant = result.mappings().first()

            if updated_variant is None:
                raise CustomError.internal_server(
                    f"Error updating the variant: variant {update_variant.variant_id} not found"
                )

            category = await self._read_category(updated_variant["category_id"])

            log_with_context(
                logger, "debug", "Variant updated",
                user_id=update_variant.user_id,
                operation="update_variant",
                variant_id=updated_variant["id"],
            )

            return Variant.create(dict(updated_variant), category=category)
        except CustomError:
            raise
        except Exception as e:
            raise self._internal_error("update_variant", e) from e

    async def _read_category(self, category_id: int) -> ExerciseCategory:
        stmt = (
            select(ExerciseCategoryModel.id, ExerciseCategoryModel.name)
            .where(ExerciseCategoryModel.id == category_id)
        )
        row = (await self.session.execute(stmt)).mappings().one()
        return ExerciseCategory.create(dict(row))

    @staticmethod
    def _exercise_from_row(row: Mapping[str, Any]) -> Exercise:
        category = ExerciseCategory.create(
            id=row["category_id"],
            name=row["category_name"],
        )

        variant = None
        if row["variant_id"] is not None:
            variant = Variant.create(
                id=row["variant_id"],
                name=row["variant_name"],
                video=row["variant_video"],
                image=row["variant_image"],
                category=ExerciseCategory.create(
                    id=row["variant_category_id"],
                    name=row["variant_category_name"],
                ),
            )

        return Exercise.create(
            id=row["id"],
            name=row["name"],
            video=row["video"],
            image=row["image"],
            user_id=row["user_id"],
            category=category,
            variant=variant,
        )

    @staticmethod
    def _internal_error(operation: str, error: Exception, **context: Any) -> CustomError:
        logger.exception(
            f"{operation} failed: {error}",
            extra={"operation": operation, **context},
        )
        return CustomError.internal_server()
