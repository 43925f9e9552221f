"""Exercise catalog command."""

import click

from ..db import ExerciseRepository
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.command()
@click.option("--equipment", "-e", multiple=True, help="Only exercises usable with this equipment")
@click.option("--all", "include_inactive", is_flag=True, help="Include retired exercises")
@click.option("--retire", "retire_id", metavar="ID", help="Retire an exercise from plan generation")
@click.option("--restore", "restore_id", metavar="ID", help="Make a retired exercise available again")
@click.pass_context
@async_command
async def exercises(
    ctx,
    equipment: tuple[str, ...],
    include_inactive: bool,
    retire_id: str | None,
    restore_id: str | None,
):
    """List the exercise catalog, or retire and restore exercises.

    Examples:

        # Exercises usable with a kettlebell
        gym-planner exercises -e kettlebell

        # Stop generating plans with an exercise
        gym-planner exercises --retire barbell-back-squat
    """
    repo = ExerciseRepository(ensure_initialized(ctx))

    if retire_id and restore_id:
        raise click.UsageError("Use either --retire or --restore, not both")
    if retire_id or restore_id:
        exercise_id = retire_id or restore_id
        if not await repo.set_active(exercise_id, is_active=bool(restore_id)):
            echo_error(f"Exercise '{exercise_id}' not found")
            ctx.exit(1)
        echo_success(f"{'Restored' if restore_id else 'Retired'} '{exercise_id}'")
        return

    if equipment:
        entries = await repo.query_active(frozenset(equipment))
    else:
        entries = await repo.list_all(include_inactive=include_inactive)

    if not entries:
        echo_info("No exercises found")
        return

    headers = ["ID", "Name", "Primary", "Equipment", "Type"]
    rows = [
        [
            entry.id,
            entry.name,
            ", ".join(sorted(entry.primary_muscle_groups)),
            ", ".join(sorted(entry.equipment_needed)),
            ("compound" if entry.is_compound else "isolation")
            + ("" if entry.is_active else " (retired)"),
        ]
        for entry in entries
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(entries)} exercise(s)")
