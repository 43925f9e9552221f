"""API server command."""

import logging

import click

from ..db.engine import DATA_DIR_ENV
from .base import echo_info, ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the JSON API server.

    Examples:

        # Serve the plan API on port 8000
        gym-planner serve

        # Development mode with auto-reload
        gym-planner serve --reload
    """
    db_path = ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    echo_info(f"Serving plans from {db_path}")
    click.echo(f"  API:     http://{host}:{port}/workouts/plans")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()

    log_level = logging.getLevelName(logging.getLogger().getEffectiveLevel()).lower()

    if reload:
        # The reloader imports the factory in a fresh process, which finds
        # the database through the data dir override
        click.echo(f"  Reloading enabled, data dir taken from ${DATA_DIR_ENV} if set")
        uvicorn.run(
            "gym_planner.web:create_app",
            host=host,
            port=port,
            reload=True,
            factory=True,
            log_level=log_level,
        )
    else:
        uvicorn.run(create_app(db_path), host=host, port=port, log_level=log_level)
