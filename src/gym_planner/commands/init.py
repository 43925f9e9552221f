"""Initialize project command."""

import click

from ..db import ExerciseRepository, get_data_dir, get_db_path, init_db, seed_exercises
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the gym-planner database.

    This creates the data directory and initializes the SQLite database
    with the required schema and the built-in exercise library.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing gym-planner in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_exercises(db_path)
    active = await ExerciseRepository(db_path).list_all()
    echo_success(f"Exercise library populated ({count} new, {len(active)} active)")

    click.echo()
    click.echo("gym-planner is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  Generate a plan:")
    click.echo("     gym-planner generate --user me --goal get_stronger -e barbell -e bench --days 3")
