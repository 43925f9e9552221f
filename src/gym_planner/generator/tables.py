"""Policy tables driving plan generation.

All tables live on an immutable ``GeneratorTables`` value so a generator can
be built with overridden tables in tests or alternative deployments. The
mappings are wrapped in ``MappingProxyType`` and every enum-keyed table is
checked for completeness at construction, so a missing template type or
experience level fails loudly instead of silently falling through.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

from ..models.exercises import MuscleGroup
from ..models.plan import TemplateType, WorkoutSplitDay
from ..models.request import ExperienceLevel, FitnessGoal


class SetsAndReps(NamedTuple):
    """Sets and rep scheme for one exercise."""

    sets: int
    reps: str


class TemplateOverride(NamedTuple):
    """Adjustment a template type applies on top of the base scheme."""

    extra_sets: int
    reps: str


class RestPeriods(NamedTuple):
    """Rest in seconds between sets, by exercise kind."""

    compound: int
    isolation: int


def _day(label: str, *groups: MuscleGroup) -> WorkoutSplitDay:
    return WorkoutSplitDay(label=label, muscle_groups=frozenset(g.value for g in groups))


_LOWER = (MuscleGroup.LEGS, MuscleGroup.GLUTES, MuscleGroup.CALVES)

DEFAULT_SPLITS: Mapping[int, tuple[WorkoutSplitDay, ...]] = MappingProxyType({
    2: (
        _day(
            "Upper Body",
            MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS, MuscleGroup.ARMS,
        ),
        _day("Lower Body", *_LOWER),
    ),
    3: (
        _day(
            "Push (Chest, Shoulders, Triceps)",
            MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS,
        ),
        _day("Pull (Back, Biceps)", MuscleGroup.BACK, MuscleGroup.BICEPS),
        _day("Legs (Quads, Hamstrings, Glutes)", *_LOWER),
    ),
    4: (
        _day("Chest & Triceps", MuscleGroup.CHEST, MuscleGroup.TRICEPS),
        _day("Back & Biceps", MuscleGroup.BACK, MuscleGroup.BICEPS),
        _day("Shoulders & Core", MuscleGroup.SHOULDERS, MuscleGroup.CORE),
        _day("Legs & Glutes", *_LOWER),
    ),
    5: (
        _day("Chest", MuscleGroup.CHEST),
        _day("Back", MuscleGroup.BACK),
        _day("Shoulders", MuscleGroup.SHOULDERS),
        _day("Arms", MuscleGroup.BICEPS, MuscleGroup.TRICEPS),
        _day("Legs", *_LOWER),
    ),
})

DEFAULT_EXERCISE_CAPS: Mapping[ExperienceLevel, int] = MappingProxyType({
    ExperienceLevel.BEGINNER: 4,
    ExperienceLevel.INTERMEDIATE: 6,
    ExperienceLevel.ADVANCED: 8,
})

DEFAULT_BASE_SCHEMES: Mapping[ExperienceLevel, SetsAndReps] = MappingProxyType({
    ExperienceLevel.BEGINNER: SetsAndReps(3, "8-12"),
    ExperienceLevel.INTERMEDIATE: SetsAndReps(4, "6-10"),
    ExperienceLevel.ADVANCED: SetsAndReps(4, "4-8"),
})

DEFAULT_TEMPLATE_OVERRIDES: Mapping[TemplateType, TemplateOverride] = MappingProxyType({
    TemplateType.STRENGTH: TemplateOverride(extra_sets=0, reps="3-6"),
    TemplateType.HYPERTROPHY: TemplateOverride(extra_sets=1, reps="8-15"),
    TemplateType.ENDURANCE: TemplateOverride(extra_sets=0, reps="12-20"),
})

DEFAULT_REST_PERIODS: Mapping[TemplateType, RestPeriods] = MappingProxyType({
    TemplateType.STRENGTH: RestPeriods(compound=180, isolation=120),
    TemplateType.HYPERTROPHY: RestPeriods(compound=90, isolation=60),
    TemplateType.ENDURANCE: RestPeriods(compound=60, isolation=45),
})

DEFAULT_WEEK_THEMES: Mapping[TemplateType, tuple[str, ...]] = MappingProxyType({
    TemplateType.STRENGTH: (
        "Foundation Building",
        "Progressive Loading",
        "Peak Intensity",
        "Power & Testing",
    ),
    TemplateType.HYPERTROPHY: (
        "Muscle Activation",
        "Volume Increase",
        "Metabolic Stress",
        "Peak Hypertrophy",
    ),
    TemplateType.ENDURANCE: (
        "Base Building",
        "Aerobic Development",
        "Lactate Threshold",
        "Peak Endurance",
    ),
})

# Order matters: the first goal rule present in the request wins.
DEFAULT_GOAL_RULES: tuple[tuple[str, TemplateType], ...] = (
    (FitnessGoal.GET_STRONGER.value, TemplateType.STRENGTH),
    (FitnessGoal.BUILD_MUSCLE.value, TemplateType.HYPERTROPHY),
    (FitnessGoal.IMPROVE_ENDURANCE.value, TemplateType.ENDURANCE),
)


@dataclass(frozen=True)
class GeneratorTables:
    """Immutable configuration for the plan generator."""

    splits: Mapping[int, tuple[WorkoutSplitDay, ...]] = field(
        default_factory=lambda: DEFAULT_SPLITS
    )
    fallback_split: int = 3
    exercise_caps: Mapping[ExperienceLevel, int] = field(
        default_factory=lambda: DEFAULT_EXERCISE_CAPS
    )
    compound_ratio: float = 0.6
    base_schemes: Mapping[ExperienceLevel, SetsAndReps] = field(
        default_factory=lambda: DEFAULT_BASE_SCHEMES
    )
    template_overrides: Mapping[TemplateType, TemplateOverride] = field(
        default_factory=lambda: DEFAULT_TEMPLATE_OVERRIDES
    )
    max_sets: int = 6
    weeks_per_set_increase: int = 2
    rest_periods: Mapping[TemplateType, RestPeriods] = field(
        default_factory=lambda: DEFAULT_REST_PERIODS
    )
    default_rest_seconds: int = 90
    week_themes: Mapping[TemplateType, tuple[str, ...]] = field(
        default_factory=lambda: DEFAULT_WEEK_THEMES
    )
    goal_rules: tuple[tuple[str, TemplateType], ...] = DEFAULT_GOAL_RULES
    default_template: TemplateType = TemplateType.HYPERTROPHY
    plan_weeks: int = 4
    first_week_note: str = "Focus on form and technique"

    def __post_init__(self):
        # Freeze any plain dicts handed in by callers
        for name in (
            "splits",
            "exercise_caps",
            "base_schemes",
            "template_overrides",
            "rest_periods",
            "week_themes",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

        _require_keys("exercise_caps", self.exercise_caps, ExperienceLevel)
        _require_keys("base_schemes", self.base_schemes, ExperienceLevel)
        _require_keys("template_overrides", self.template_overrides, TemplateType)
        _require_keys("rest_periods", self.rest_periods, TemplateType)
        _require_keys("week_themes", self.week_themes, TemplateType)

        if self.fallback_split not in self.splits:
            raise ValueError(f"Fallback split {self.fallback_split} is not in the split table")
        for count, days in self.splits.items():
            if not days:
                raise ValueError(f"Split for {count} workouts has no days")
            for day in days:
                if not day.muscle_groups:
                    raise ValueError(f"Split day '{day.label}' has no muscle groups")
        if not 0 < self.compound_ratio <= 1:
            raise ValueError(f"compound_ratio must be in (0, 1], got {self.compound_ratio}")
        if self.weeks_per_set_increase < 1:
            raise ValueError("weeks_per_set_increase must be at least 1")


def _require_keys(name: str, table: Mapping, enum_type) -> None:
    missing = [member.value for member in enum_type if member not in table]
    if missing:
        raise ValueError(f"Table '{name}' is missing entries for: {', '.join(missing)}")


DEFAULT_TABLES = GeneratorTables()
