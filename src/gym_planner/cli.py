"""CLI entry point for gym-planner."""

import logging

import click

from . import __version__
from .commands import exercises, generate, init, plans, serve


@click.group()
@click.version_option(version=__version__, prog_name="gym-planner")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
def main(log_level: str):
    """gym-planner: multi-week workout plan generator.

    Builds 4-week training plans from an exercise catalog, the equipment
    you have, your goals and your experience level.

    Example usage:

        # Initialize the database and exercise library
        gym-planner init

        # Generate a plan
        gym-planner generate -u alice -g get_stronger -e barbell -e bench -d 3

        # View and start plans
        gym-planner plans list
        gym-planner plans start 1 --user alice
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(generate)
main.add_command(plans)
main.add_command(exercises)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
