"""Plan assembly: turns a generation request into a stored workout plan."""

import logging

from ..exceptions import (
    InsufficientDayCoverage,
    NoExercisesAvailable,
    PersistenceFailure,
    PlanGenerationError,
)
from ..models.exercises import ExerciseCatalogEntry
from ..models.plan import (
    GeneratedWeek,
    GeneratedWorkout,
    PlanExerciseEntry,
    TemplateType,
    WorkoutPlan,
    WorkoutSplitDay,
)
from ..models.request import PlanGenerationRequest
from .base import ExerciseCatalogAccessor, PlanStore
from .pool import ExercisePoolLoader
from .progression import ProgressionCalculator
from .selector import ExerciseSelector
from .split import SplitPlanner
from .tables import DEFAULT_TABLES, GeneratorTables

logger = logging.getLogger(__name__)


class PlanAssembler:
    """Generates multi-week workout plans.

    The assembler holds only its collaborators and tables. The exercise pool
    is loaded per call and passed along explicitly, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        catalog: ExerciseCatalogAccessor,
        store: PlanStore,
        tables: GeneratorTables = DEFAULT_TABLES,
        match_secondary: bool = False,
    ):
        self.store = store
        self.tables = tables
        self.pool_loader = ExercisePoolLoader(catalog)
        self.split_planner = SplitPlanner(tables)
        self.selector = ExerciseSelector(tables, match_secondary=match_secondary)
        self.progression = ProgressionCalculator(tables)

    async def generate(self, request: PlanGenerationRequest) -> WorkoutPlan:
        """Generate, persist and return a plan.

        Args:
            request: Validated or unvalidated generation request

        Returns:
            The plan as stored by the plan store

        Raises:
            InvalidRequest: if the request is out of range
            NoExercisesAvailable: if no exercise matches the equipment
            InsufficientDayCoverage: if a training day has no exercises
            PersistenceFailure: if the store rejects the plan
        """
        request.validate()

        logger.info(
            "Generating plan for user %s: %d workouts/week, level=%s, goals=%s",
            request.user_id,
            request.workouts_per_week,
            request.experience_level.value,
            list(request.fitness_goals),
        )
        logger.debug("Plan request: %s", request.to_dict())

        pool = await self.pool_loader.load(request.available_equipment)
        plan = self.assemble(request, pool)

        try:
            stored = await self.store.save(plan)
        except PlanGenerationError:
            raise
        except Exception as e:
            logger.error("Failed to save plan for user %s: %s", request.user_id, e)
            raise PersistenceFailure(f"Failed to save workout plan: {e}") from e

        logger.info("Saved plan %s (%s) for user %s", stored.id, stored.name, stored.user_id)
        return stored

    def assemble(
        self,
        request: PlanGenerationRequest,
        pool: list[ExerciseCatalogEntry],
    ) -> WorkoutPlan:
        """Build the plan document from an already-loaded pool (no I/O)."""
        if not pool:
            raise NoExercisesAvailable(request.available_equipment)

        template_type = self.determine_template_type(request.fitness_goals)
        split = self.split_planner.plan(request.workouts_per_week, request.experience_level)

        # Selection does not depend on the week, so each day is resolved once
        day_exercises = [self._select_for_day(pool, day, request) for day in split]

        weeks = []
        for week_number in range(1, self.tables.plan_weeks + 1):
            workouts = []
            for day_number, (split_day, exercises) in enumerate(zip(split, day_exercises), start=1):
                workouts.append(
                    GeneratedWorkout(
                        day=day_number,
                        name=split_day.label,
                        estimated_duration=request.time_per_workout,
                        exercises=tuple(
                            self._prescribe(exercise, request, template_type, week_number)
                            for exercise in exercises
                        ),
                    )
                )
            weeks.append(
                GeneratedWeek(
                    week_number=week_number,
                    theme=self.week_theme(template_type, week_number),
                    workouts=tuple(workouts),
                )
            )

        title = template_type.value.capitalize()
        return WorkoutPlan(
            user_id=request.user_id,
            name=f"{title} Training Plan",
            description=f"{self.tables.plan_weeks}-week {template_type.value} focused training program",
            duration_weeks=self.tables.plan_weeks,
            workouts_per_week=request.workouts_per_week,
            template_type=template_type,
            weeks=tuple(weeks),
            is_active=True,
        )

    def determine_template_type(self, fitness_goals) -> TemplateType:
        """Derive the template type from goals; the first matching rule wins."""
        goals = set(fitness_goals)
        for goal, template_type in self.tables.goal_rules:
            if goal in goals:
                return template_type
        return self.tables.default_template

    def week_theme(self, template_type: TemplateType, week_number: int) -> str:
        """Theme for a week, or a plain "Week N" when the table has none."""
        themes = self.tables.week_themes[template_type]
        if 1 <= week_number <= len(themes):
            return themes[week_number - 1]
        return f"Week {week_number}"

    def _select_for_day(
        self,
        pool: list[ExerciseCatalogEntry],
        split_day: WorkoutSplitDay,
        request: PlanGenerationRequest,
    ) -> list[ExerciseCatalogEntry]:
        selected = self.selector.select(pool, split_day.muscle_groups, request.experience_level)
        if not selected:
            raise InsufficientDayCoverage(split_day.label, split_day.muscle_groups)
        return selected

    def _prescribe(
        self,
        exercise: ExerciseCatalogEntry,
        request: PlanGenerationRequest,
        template_type: TemplateType,
        week_number: int,
    ) -> PlanExerciseEntry:
        scheme = self.progression.compute(request.experience_level, template_type, week_number)
        return PlanExerciseEntry(
            exercise_id=exercise.id,
            sets=scheme.sets,
            reps=scheme.reps,
            rest_seconds=self.progression.rest_seconds(exercise.is_compound, template_type),
            notes=self.tables.first_week_note if week_number == 1 else None,
        )


async def generate_plan(
    request: PlanGenerationRequest,
    catalog: ExerciseCatalogAccessor,
    store: PlanStore,
    tables: GeneratorTables = DEFAULT_TABLES,
) -> WorkoutPlan:
    """Generate and store a plan with a fresh assembler."""
    return await PlanAssembler(catalog, store, tables).generate(request)
