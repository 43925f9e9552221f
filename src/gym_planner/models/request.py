"""Plan generation request model."""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import InvalidRequest

MIN_WORKOUTS_PER_WEEK = 2
MAX_WORKOUTS_PER_WEEK = 6
MIN_TIME_PER_WORKOUT = 30
MAX_TIME_PER_WORKOUT = 120


class ExperienceLevel(str, Enum):
    """Training experience level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FitnessGoal(str, Enum):
    """Fitness goal identifiers understood by the generator."""

    BUILD_MUSCLE = "build_muscle"
    GET_STRONGER = "get_stronger"
    LOSE_WEIGHT = "lose_weight"
    IMPROVE_ENDURANCE = "improve_endurance"
    GENERAL_FITNESS = "general_fitness"
    SPECIFIC_SPORT = "specific_sport"


@dataclass(frozen=True)
class PlanGenerationRequest:
    """Everything the generator needs to build a plan for one user."""

    user_id: str
    fitness_goals: tuple[str, ...]
    experience_level: ExperienceLevel
    available_equipment: frozenset[str]
    workouts_per_week: int
    time_per_workout: int  # minutes

    def validate(self) -> None:
        """Reject structurally invalid requests.

        Raises:
            InvalidRequest: if any field is missing or out of range
        """
        if not self.user_id:
            raise InvalidRequest("user_id is required")
        if not self.fitness_goals:
            raise InvalidRequest("At least one fitness goal is required")
        if not isinstance(self.experience_level, ExperienceLevel):
            raise InvalidRequest(f"Unknown experience level: {self.experience_level!r}")
        if not self.available_equipment:
            raise InvalidRequest("At least one equipment item is required")
        if not MIN_WORKOUTS_PER_WEEK <= self.workouts_per_week <= MAX_WORKOUTS_PER_WEEK:
            raise InvalidRequest(
                f"workouts_per_week must be between {MIN_WORKOUTS_PER_WEEK} and "
                f"{MAX_WORKOUTS_PER_WEEK}, got {self.workouts_per_week}"
            )
        if not MIN_TIME_PER_WORKOUT <= self.time_per_workout <= MAX_TIME_PER_WORKOUT:
            raise InvalidRequest(
                f"time_per_workout must be between {MIN_TIME_PER_WORKOUT} and "
                f"{MAX_TIME_PER_WORKOUT} minutes, got {self.time_per_workout}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "user_id": self.user_id,
            "fitness_goals": list(self.fitness_goals),
            "experience_level": self.experience_level.value,
            "available_equipment": sorted(self.available_equipment),
            "workouts_per_week": self.workouts_per_week,
            "time_per_workout": self.time_per_workout,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlanGenerationRequest":
        """Create from dictionary."""
        try:
            level = ExperienceLevel(data["experience_level"])
        except ValueError as e:
            raise InvalidRequest(str(e)) from e
        return cls(
            user_id=data["user_id"],
            fitness_goals=tuple(data["fitness_goals"]),
            experience_level=level,
            available_equipment=frozenset(data["available_equipment"]),
            workouts_per_week=data["workouts_per_week"],
            time_per_workout=data["time_per_workout"],
        )
