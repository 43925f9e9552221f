"""Database layer for gym-planner."""

from .engine import get_data_dir, get_db_path, init_db, seed_exercises
from .repositories import ExerciseRepository, WorkoutPlanRepository

__all__ = [
    "ExerciseRepository",
    "get_data_dir",
    "get_db_path",
    "init_db",
    "seed_exercises",
    "WorkoutPlanRepository",
]
