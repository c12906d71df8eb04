"""
User model.

Users are managed by the authentication layer; this table only exists
as the target of the ownership foreign keys on exercises, variants
and descriptions.
"""

from sqlalchemy import Column, String

from exercise_tracker.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin


class User(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    Application user.

    Attributes:
        id: UUID primary key
        email: Login email (unique)
        created_at: When the user was created
    """

    __tablename__ = "users"

    email = Column(
        String(255),
        nullable=False,
        unique=True,
        doc="Login email"
    )
