"""Plan management commands."""

import click

from ..db import WorkoutPlanRepository
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
@click.pass_context
def plans(ctx):
    """Manage generated workout plans.

    Commands for listing, viewing, starting, completing and deleting plans.
    """
    ctx.obj = WorkoutPlanRepository(ensure_initialized(ctx))


@plans.command(name="list")
@click.option("--user", "-u", "user_id", help="Only show plans for this user")
@click.pass_obj
@async_command
async def list_plans(repo: WorkoutPlanRepository, user_id: str | None):
    """List generated plans."""
    if user_id:
        all_plans = await repo.list_for_user(user_id)
    else:
        all_plans = await repo.list_all()

    if not all_plans:
        echo_info("No plans found. Generate one with 'gym-planner generate'")
        return

    headers = ["ID", "User", "Name", "Days", "Exercises", "Active", "Created"]
    rows = []
    for plan in all_plans:
        created = plan.created_at.strftime("%Y-%m-%d") if plan.created_at else "N/A"
        rows.append([
            str(plan.id),
            plan.user_id,
            plan.name,
            str(plan.workouts_per_week),
            str(plan.total_exercises),
            "yes" if plan.is_active else "no",
            created,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_plans)} plan(s)")


@plans.command()
@click.argument("plan_id", type=int)
@click.pass_context
@async_command
async def show(ctx, plan_id: int):
    """Show details of a specific plan."""
    repo = ctx.obj

    plan = await repo.get(plan_id)
    if not plan:
        echo_error(f"Plan ID {plan_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{plan.name} (ID: {plan.id}, user: {plan.user_id})")
    click.echo("=" * 60)
    click.echo(f"Created: {plan.created_at}")
    if plan.started_at:
        click.echo(f"Started: {plan.started_at}")
    if plan.completed_at:
        click.echo(f"Completed: {plan.completed_at}")
    click.echo()
    click.echo(plan.get_summary())


@plans.command()
@click.argument("plan_id", type=int)
@click.option("--user", "-u", "user_id", required=True, help="Owner of the plan")
@click.pass_context
@async_command
async def start(ctx, plan_id: int, user_id: str):
    """Start a plan (deactivates the user's other plans)."""
    repo = ctx.obj

    plan = await repo.start(plan_id, user_id)
    if not plan:
        echo_error(f"Plan ID {plan_id} not found for user {user_id}")
        ctx.exit(1)

    echo_success(f"Started '{plan.name}' (ID: {plan.id})")


@plans.command()
@click.argument("plan_id", type=int)
@click.option("--user", "-u", "user_id", required=True, help="Owner of the plan")
@click.pass_context
@async_command
async def complete(ctx, plan_id: int, user_id: str):
    """Mark a plan as completed."""
    repo = ctx.obj

    plan = await repo.complete(plan_id, user_id)
    if not plan:
        echo_error(f"Plan ID {plan_id} not found for user {user_id}")
        ctx.exit(1)

    echo_success(f"Completed '{plan.name}' (ID: {plan.id})")


@plans.command()
@click.argument("plan_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, plan_id: int, force: bool):
    """Delete a plan."""
    repo = ctx.obj

    plan = await repo.get(plan_id)
    if not plan:
        echo_error(f"Plan ID {plan_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Plan: {plan.name}")
        if not click.confirm("Are you sure you want to delete this plan?"):
            echo_info("Cancelled")
            return

    await repo.delete(plan_id)
    echo_success(f"Plan {plan_id} deleted")
