"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- An in-memory database per test
- Seeded users and categories
"""

import os

import pytest

# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ.pop("DEFAULT_PAGE_SIZE", None)


@pytest.fixture
async def engine():
    """
    Provide an in-memory SQLite engine with all tables created.

    Yields:
        AsyncEngine bound to a fresh database
    """
    from exercise_tracker.core.database import get_async_engine, init_db

    test_engine = get_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await init_db(bind=test_engine)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
async def async_session(engine):
    """
    Provide an async database session.

    Yields:
        AsyncSession for testing
    """
    from exercise_tracker.core.database import get_session_maker

    session_maker = get_session_maker(engine)

    async with session_maker() as session:
        yield session


@pytest.fixture
async def users(async_session):
    """
    Create two users.

    Returns:
        Tuple of (owner, other) User instances
    """
    from exercise_tracker.models import User

    owner = User(email="owner@example.com")
    other = User(email="other@example.com")
    async_session.add_all([owner, other])
    await async_session.commit()
    return owner, other


@pytest.fixture
async def categories(async_session):
    """
    Create the "Legs" (id 1) and "Back" (id 2) categories.

    Returns:
        Tuple of (legs, back) ExerciseCategoryModel instances
    """
    from exercise_tracker.models import ExerciseCategoryModel

    legs = ExerciseCategoryModel(id=1, name="Legs")
    back = ExerciseCategoryModel(id=2, name="Back")
    async_session.add_all([legs, back])
    await async_session.commit()
    return legs, back


@pytest.fixture
def repo(async_session):
    """
    Create ExerciseRepository instance.

    Returns:
        ExerciseRepository bound to the test session
    """
    from exercise_tracker.repositories.exercise import ExerciseRepository

    return ExerciseRepository(async_session)
