"""Weekly muscle-group split planning."""

import logging
from itertools import cycle, islice

from ..models.plan import WorkoutSplitDay
from ..models.request import ExperienceLevel
from .tables import DEFAULT_TABLES, GeneratorTables

logger = logging.getLogger(__name__)


class SplitPlanner:
    """Chooses the muscle-group split for a training week."""

    def __init__(self, tables: GeneratorTables = DEFAULT_TABLES):
        self.tables = tables

    def plan(
        self,
        workouts_per_week: int,
        experience_level: ExperienceLevel | None = None,
    ) -> list[WorkoutSplitDay]:
        """Build the split for the requested number of workouts.

        Counts without a table entry use the fallback split (3-day push/pull/legs)
        and a warning is logged. The result always has ``workouts_per_week``
        days, cycling through the chosen split when it is shorter.

        Args:
            workouts_per_week: Training days per week
            experience_level: Accepted for future tie-breaks; does not change the split

        Returns:
            Ordered split days, one per workout
        """
        if workouts_per_week < 1:
            raise ValueError(f"workouts_per_week must be positive, got {workouts_per_week}")

        template = self.tables.splits.get(workouts_per_week)
        if template is None:
            logger.warning(
                "No %d-day split defined, falling back to the %d-day split",
                workouts_per_week,
                self.tables.fallback_split,
            )
            template = self.tables.splits[self.tables.fallback_split]

        return list(islice(cycle(template), workouts_per_week))
