"""Generate plan command."""

import click

from ..db import ExerciseRepository, WorkoutPlanRepository
from ..exceptions import InsufficientEquipmentOrCatalog, PlanGenerationError
from ..generator import PlanAssembler
from ..models.exercises import EquipmentType
from ..models.request import (
    MAX_TIME_PER_WORKOUT,
    MAX_WORKOUTS_PER_WEEK,
    MIN_TIME_PER_WORKOUT,
    MIN_WORKOUTS_PER_WEEK,
    ExperienceLevel,
    FitnessGoal,
    PlanGenerationRequest,
)
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command()
@click.option("--user", "-u", "user_id", required=True, help="ID of the plan owner")
@click.option(
    "--goal",
    "-g",
    "goals",
    multiple=True,
    required=True,
    type=click.Choice([g.value for g in FitnessGoal]),
    help="Fitness goal (repeatable, order matters)",
)
@click.option(
    "--level",
    "-l",
    type=click.Choice([e.value for e in ExperienceLevel]),
    default=ExperienceLevel.INTERMEDIATE.value,
    show_default=True,
    help="Training experience level",
)
@click.option(
    "--equipment",
    "-e",
    multiple=True,
    required=True,
    help=f"Available equipment (repeatable), e.g. {', '.join(e.value for e in list(EquipmentType)[:4])}",
)
@click.option(
    "--days",
    "-d",
    type=click.IntRange(MIN_WORKOUTS_PER_WEEK, MAX_WORKOUTS_PER_WEEK),
    default=3,
    show_default=True,
    help="Workouts per week",
)
@click.option(
    "--minutes",
    "-m",
    type=click.IntRange(MIN_TIME_PER_WORKOUT, MAX_TIME_PER_WORKOUT),
    default=60,
    show_default=True,
    help="Minutes per workout",
)
@click.option("--dry-run", is_flag=True, help="Print the plan without saving it")
@click.pass_context
@async_command
async def generate(
    ctx,
    user_id: str,
    goals: tuple[str, ...],
    level: str,
    equipment: tuple[str, ...],
    days: int,
    minutes: int,
    dry_run: bool,
):
    """Generate a 4-week workout plan.

    Examples:

        # Three-day strength plan with a barbell and bench
        gym-planner generate -u alice -g get_stronger -e barbell -e bench -d 3

        # Preview a beginner hypertrophy plan without saving it
        gym-planner generate -u bob -g build_muscle -e dumbbell -l beginner --dry-run
    """
    db_path = ensure_initialized(ctx)

    request = PlanGenerationRequest(
        user_id=user_id,
        fitness_goals=goals,
        experience_level=ExperienceLevel(level),
        available_equipment=frozenset(equipment),
        workouts_per_week=days,
        time_per_workout=minutes,
    )
    assembler = PlanAssembler(
        catalog=ExerciseRepository(db_path),
        store=WorkoutPlanRepository(db_path),
    )

    echo_info(f"Generating a {days}-day plan for {user_id}...")

    try:
        if dry_run:
            request.validate()
            pool = await assembler.pool_loader.load(request.available_equipment)
            plan = assembler.assemble(request, pool)
        else:
            plan = await assembler.generate(request)
    except InsufficientEquipmentOrCatalog as e:
        echo_error(f"{e}. Try adding more equipment with --equipment.")
        ctx.exit(1)
    except PlanGenerationError as e:
        echo_error(f"Failed to generate plan: {e}")
        ctx.exit(1)

    click.echo()
    if dry_run:
        echo_success("Plan generated (not saved)")
    else:
        echo_success(f"Plan generated successfully! (ID: {plan.id})")
    click.echo()

    click.echo("=" * 60)
    click.echo(plan.get_summary())
    click.echo("=" * 60)

    if not dry_run:
        click.echo()
        click.echo("Next steps:")
        click.echo(f"  - View plan: gym-planner plans show {plan.id}")
        click.echo(f"  - Start plan: gym-planner plans start {plan.id} --user {user_id}")
