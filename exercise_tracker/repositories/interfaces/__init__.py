"""Repository interface contracts (ABCs)"""

from exercise_tracker.repositories.interfaces.exercise import IExerciseRepository

__all__ = [
    'IExerciseRepository',
]
