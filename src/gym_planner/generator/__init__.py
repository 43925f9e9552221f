"""Workout plan generator."""

from .assembler import PlanAssembler, generate_plan
from .base import ExerciseCatalogAccessor, PlanStore
from .pool import ExercisePoolLoader
from .progression import ProgressionCalculator
from .selector import ExerciseSelector
from .split import SplitPlanner
from .tables import DEFAULT_TABLES, GeneratorTables, SetsAndReps

__all__ = [
    "DEFAULT_TABLES",
    "ExerciseCatalogAccessor",
    "ExercisePoolLoader",
    "ExerciseSelector",
    "GeneratorTables",
    "PlanAssembler",
    "PlanStore",
    "ProgressionCalculator",
    "SetsAndReps",
    "SplitPlanner",
    "generate_plan",
]
