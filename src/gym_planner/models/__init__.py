"""Data models for gym-planner."""

from .exercises import COMMON_EXERCISES, EquipmentType, ExerciseCatalogEntry, MuscleGroup
from .plan import (
    GeneratedWeek,
    GeneratedWorkout,
    PlanExerciseEntry,
    TemplateType,
    WorkoutPlan,
    WorkoutSplitDay,
)
from .request import ExperienceLevel, FitnessGoal, PlanGenerationRequest

__all__ = [
    "COMMON_EXERCISES",
    "EquipmentType",
    "ExerciseCatalogEntry",
    "ExperienceLevel",
    "FitnessGoal",
    "GeneratedWeek",
    "GeneratedWorkout",
    "MuscleGroup",
    "PlanExerciseEntry",
    "PlanGenerationRequest",
    "TemplateType",
    "WorkoutPlan",
    "WorkoutSplitDay",
]
