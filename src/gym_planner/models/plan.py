"""Workout plan data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TemplateType(str, Enum):
    """Training emphasis driving rep ranges and rest periods."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"


@dataclass(frozen=True)
class WorkoutSplitDay:
    """One day of a weekly split: a label and the muscle groups it targets."""

    label: str
    muscle_groups: frozenset[str]


@dataclass(frozen=True)
class PlanExerciseEntry:
    """An exercise prescription within a generated workout."""

    exercise_id: str
    sets: int
    reps: str  # "5" or a "lo-hi" range such as "8-12"
    rest_seconds: int
    weight: float | None = None
    notes: str | None = None

    def __post_init__(self):
        if self.sets < 1:
            raise ValueError(f"sets must be at least 1, got {self.sets}")
        if self.rest_seconds < 0:
            raise ValueError(f"rest_seconds cannot be negative, got {self.rest_seconds}")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "rest_seconds": self.rest_seconds,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlanExerciseEntry":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            sets=data["sets"],
            reps=data["reps"],
            rest_seconds=data["rest_seconds"],
            weight=data.get("weight"),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class GeneratedWorkout:
    """A single training day within a week."""

    day: int
    name: str
    estimated_duration: int  # minutes
    exercises: tuple[PlanExerciseEntry, ...]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day": self.day,
            "name": self.name,
            "estimated_duration": self.estimated_duration,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedWorkout":
        """Create from dictionary."""
        return cls(
            day=data["day"],
            name=data["name"],
            estimated_duration=data["estimated_duration"],
            exercises=tuple(PlanExerciseEntry.from_dict(ex) for ex in data["exercises"]),
        )


@dataclass(frozen=True)
class GeneratedWeek:
    """A week in the plan with its theme."""

    week_number: int
    theme: str
    workouts: tuple[GeneratedWorkout, ...]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_number": self.week_number,
            "theme": self.theme,
            "workouts": [w.to_dict() for w in self.workouts],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedWeek":
        """Create from dictionary."""
        return cls(
            week_number=data["week_number"],
            theme=data["theme"],
            workouts=tuple(GeneratedWorkout.from_dict(w) for w in data["workouts"]),
        )


@dataclass(frozen=True)
class WorkoutPlan:
    """A complete multi-week workout plan."""

    user_id: str
    name: str
    description: str
    workouts_per_week: int
    template_type: TemplateType
    weeks: tuple[GeneratedWeek, ...]
    duration_weeks: int = 4
    is_active: bool = True
    id: int | None = None
    created_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and API responses."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "duration_weeks": self.duration_weeks,
            "workouts_per_week": self.workouts_per_week,
            "template_type": self.template_type.value,
            "weeks": [week.to_dict() for week in self.weeks],
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutPlan":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            user_id=data["user_id"],
            name=data["name"],
            description=data.get("description", ""),
            duration_weeks=data.get("duration_weeks", 4),
            workouts_per_week=data["workouts_per_week"],
            template_type=TemplateType(data["template_type"]),
            weeks=tuple(GeneratedWeek.from_dict(week) for week in data["weeks"]),
            is_active=data.get("is_active", True),
            created_at=_parse_timestamp(data.get("created_at")),
            started_at=_parse_timestamp(data.get("started_at")),
            completed_at=_parse_timestamp(data.get("completed_at")),
        )

    @property
    def total_exercises(self) -> int:
        """Count exercise entries across all weeks."""
        return sum(len(w.exercises) for week in self.weeks for w in week.workouts)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the plan."""
        summary = f"Plan: {self.name}\n"
        summary += f"Description: {self.description}\n"
        summary += f"Duration: {self.duration_weeks} weeks, {self.workouts_per_week} workouts/week\n\n"

        for week in self.weeks:
            summary += f"Week {week.week_number} - {week.theme}:\n"
            for workout in week.workouts:
                summary += f"  Day {workout.day}: {workout.name} (~{workout.estimated_duration} min)\n"
                for ex in workout.exercises:
                    summary += f"    - {ex.exercise_id}: {ex.sets}x{ex.reps}, rest {ex.rest_seconds}s\n"
            summary += "\n"

        return summary


def _parse_timestamp(value: str | datetime | None) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
