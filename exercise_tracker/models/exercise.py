"""
Exercise catalogue models.

Tables:
- exercises_categories: reference data every exercise and variant points at
- exercises: shared exercises (user_id NULL) and user-created exercises
- variants: a user's customization of an exercise, one per (exercise, user)
- exercises_descriptions: free-text descriptions owned by a user
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from exercise_tracker.models.base import Base, ModelMixin


class ExerciseCategoryModel(Base, ModelMixin):
    """
    Exercise category (e.g. "Legs", "Back").

    Attributes:
        id: Integer primary key
        name: Category name (unique)
    """

    __tablename__ = "exercises_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(
        String(255),
        nullable=False,
        unique=True,
        doc="Category name"
    )


class ExerciseModel(Base, ModelMixin):
    """
    Exercise row.

    Attributes:
        id: Integer primary key
        name: Exercise name
        video: Optional video URL
        image: Optional image URL
        category_id: Foreign key to exercises_categories
        user_id: Owner; NULL for shared exercises visible to everyone
    """

    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False, doc="Exercise name")

    video = Column(String(2048), nullable=True, doc="Video URL")

    image = Column(String(2048), nullable=True, doc="Image URL")

    category_id = Column(
        Integer,
        ForeignKey("exercises_categories.id"),
        nullable=False,
        doc="Foreign key to exercises_categories"
    )

    user_id = Column(
        String,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        doc="Owning user, NULL for shared exercises"
    )

    __table_args__ = (
        Index("idx_exercises_category", "category_id"),
        Index("idx_exercises_user", "user_id"),
    )


class VariantModel(Base, ModelMixin):
    """
    A user's variant of an exercise.

    Attributes:
        id: Integer primary key
        name: Variant name
        video: Optional video URL
        image: Optional image URL
        category_id: Foreign key to exercises_categories
        exercise_id: Foreign key to the base exercise
        user_id: Owning user
    """

    __tablename__ = "variants"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False, doc="Variant name")

    video = Column(String(2048), nullable=True, doc="Video URL")

    image = Column(String(2048), nullable=True, doc="Image URL")

    category_id = Column(
        Integer,
        ForeignKey("exercises_categories.id"),
        nullable=False,
        doc="Foreign key to exercises_categories"
    )

    exercise_id = Column(
        Integer,
        ForeignKey("exercises.id", ondelete="CASCADE"),
        nullable=False,
        doc="Foreign key to the base exercise"
    )

    user_id = Column(
        String,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        doc="Owning user"
    )

    __table_args__ = (
        UniqueConstraint("exercise_id", "user_id", name="uq_variant_exercise_user"),
        Index("idx_variants_user", "user_id"),
    )


class ExerciseDescriptionModel(Base, ModelMixin):
    """
    Free-text exercise description owned by a user.

    Attributes:
        id: Integer primary key
        description: Description text
        user_id: Owning user
    """

    __tablename__ = "exercises_descriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)

    description = Column(Text, nullable=False, doc="Description text")

    user_id = Column(
        String,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        doc="Owning user"
    )

    __table_args__ = (
        Index("idx_exercises_descriptions_user", "user_id"),
    )
