"""Set, rep and rest prescriptions with progressive overload."""

from ..models.plan import TemplateType
from ..models.request import ExperienceLevel
from .tables import DEFAULT_TABLES, GeneratorTables, SetsAndReps


class ProgressionCalculator:
    """Computes per-exercise volume and rest for a given week."""

    def __init__(self, tables: GeneratorTables = DEFAULT_TABLES):
        self.tables = tables

    def compute(
        self,
        experience_level: ExperienceLevel,
        template_type: TemplateType,
        week_number: int,
    ) -> SetsAndReps:
        """Compute sets and reps for an exercise.

        The base scheme comes from the experience level, the template type
        overrides the rep range (hypertrophy also adds a set), then one set
        is added every two weeks up to the set cap.

        Args:
            experience_level: Trainee experience
            template_type: Training emphasis of the plan
            week_number: Week in the plan, starting at 1

        Returns:
            SetsAndReps for the week
        """
        if not 1 <= week_number <= self.tables.plan_weeks:
            raise ValueError(
                f"week_number must be between 1 and {self.tables.plan_weeks}, got {week_number}"
            )

        base = self.tables.base_schemes[experience_level]
        override = self.tables.template_overrides[TemplateType(template_type)]

        sets = base.sets + override.extra_sets
        overload = (week_number - 1) // self.tables.weeks_per_set_increase
        sets = min(sets + overload, self.tables.max_sets)

        return SetsAndReps(sets=sets, reps=override.reps)

    def rest_seconds(self, is_compound: bool, template_type: TemplateType | str) -> int:
        """Rest between sets; unknown template types get the default rest."""
        try:
            periods = self.tables.rest_periods[TemplateType(template_type)]
        except ValueError:
            return self.tables.default_rest_seconds
        return periods.compound if is_compound else periods.isolation
