"""Exercise selection for a single workout."""

import math

from ..models.exercises import ExerciseCatalogEntry
from ..models.request import ExperienceLevel
from .tables import DEFAULT_TABLES, GeneratorTables


class ExerciseSelector:
    """Picks a bounded, compound-first set of exercises for a training day.

    Selection is deterministic: candidates keep the order of the pool, so the
    same pool, targets and level always produce the same list.
    """

    def __init__(
        self,
        tables: GeneratorTables = DEFAULT_TABLES,
        match_secondary: bool = False,
    ):
        self.tables = tables
        self.match_secondary = match_secondary

    def cap_for(self, experience_level: ExperienceLevel) -> int:
        """Maximum exercises per workout for an experience level."""
        return self.tables.exercise_caps[experience_level]

    def candidates(
        self,
        pool: list[ExerciseCatalogEntry],
        target_muscle_groups: frozenset[str],
    ) -> list[ExerciseCatalogEntry]:
        """Exercises in the pool that train any of the target muscle groups."""
        targets = frozenset(target_muscle_groups)
        matches = []
        for entry in pool:
            groups = entry.primary_muscle_groups
            if self.match_secondary:
                groups = groups | entry.secondary_muscle_groups
            if groups & targets:
                matches.append(entry)
        return matches

    def select(
        self,
        pool: list[ExerciseCatalogEntry],
        target_muscle_groups: frozenset[str],
        experience_level: ExperienceLevel,
    ) -> list[ExerciseCatalogEntry]:
        """Select exercises for one workout.

        Args:
            pool: Exercises usable with the available equipment
            target_muscle_groups: Muscle groups the day trains
            experience_level: Determines the exercise cap

        Returns:
            Up to the level's cap of exercises, compound movements first
        """
        cap = self.cap_for(experience_level)
        available = self.candidates(pool, target_muscle_groups)

        compound = [ex for ex in available if ex.is_compound]
        isolation = [ex for ex in available if not ex.is_compound]

        compound_count = min(len(compound), math.ceil(cap * self.tables.compound_ratio))
        selected = compound[:compound_count]
        selected.extend(isolation[:cap - len(selected)])

        return selected[:cap]
