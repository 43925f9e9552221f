"""Tests for the command-line interface."""

import asyncio

import pytest
from click.testing import CliRunner

from gym_planner.cli import main
from gym_planner.db import WorkoutPlanRepository, get_db_path
from gym_planner.db.engine import DATA_DIR_ENV


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner pointed at a temporary data directory."""
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "data"))
    return CliRunner()


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


GENERATE = ["generate", "-u", "alice", "-g", "get_stronger", "-e", "barbell", "-e", "bench"]


class TestCli:
    """Tests for CLI commands."""

    def test_requires_init(self, runner):
        """Test that commands refuse to run before init."""
        result = runner.invoke(main, ["plans", "list"])

        assert result.exit_code == 1
        assert "gym-planner init" in result.output

    def test_init_seeds_catalog(self, runner):
        """Test that init reports the seeded exercises."""
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert "Exercise library populated" in result.output

    def test_generate_and_list(self, initialized):
        """Test generating a plan and listing it."""
        result = initialized.invoke(main, GENERATE)

        assert result.exit_code == 0, result.output
        assert "Plan generated successfully! (ID: 1)" in result.output
        assert "Strength Training Plan" in result.output

        listed = initialized.invoke(main, ["plans", "list", "--user", "alice"])
        assert "Strength Training Plan" in listed.output
        assert "Total: 1 plan(s)" in listed.output

    def test_dry_run_does_not_save(self, initialized):
        """Test that a dry run prints the plan without storing it."""
        result = initialized.invoke(main, GENERATE + ["--dry-run"])

        assert result.exit_code == 0, result.output
        assert "not saved" in result.output
        listed = initialized.invoke(main, ["plans", "list"])
        assert "No plans found" in listed.output

    def test_generate_insufficient_equipment(self, initialized):
        """Test the error path when equipment covers too little."""
        result = initialized.invoke(
            main, ["generate", "-u", "alice", "-g", "build_muscle", "-e", "kettlebell"]
        )

        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_days_out_of_range(self, initialized):
        """Test that click rejects an out-of-range day count."""
        result = initialized.invoke(main, GENERATE + ["--days", "7"])

        assert result.exit_code == 2

    def test_plan_lifecycle(self, initialized):
        """Test starting, completing and deleting a plan."""
        initialized.invoke(main, GENERATE)

        started = initialized.invoke(main, ["plans", "start", "1", "--user", "alice"])
        assert started.exit_code == 0
        assert "Started" in started.output

        wrong_user = initialized.invoke(main, ["plans", "start", "1", "--user", "bob"])
        assert wrong_user.exit_code == 1

        completed = initialized.invoke(main, ["plans", "complete", "1", "--user", "alice"])
        assert "Completed" in completed.output

        deleted = initialized.invoke(main, ["plans", "delete", "1", "--force"])
        assert "Plan 1 deleted" in deleted.output
        assert initialized.invoke(main, ["plans", "show", "1"]).exit_code == 1

    def test_exercises_by_equipment(self, initialized):
        """Test listing the catalog filtered by equipment."""
        result = initialized.invoke(main, ["exercises", "-e", "kettlebell"])

        assert result.exit_code == 0
        assert "goblet-squat" in result.output
        assert "Total: 2 exercise(s)" in result.output

    def test_list_shows_exercise_count(self, initialized):
        """Test that the plan list reports the plan's exercise entries."""
        initialized.invoke(main, GENERATE)
        plan = asyncio.run(WorkoutPlanRepository(get_db_path()).get(1))

        listed = initialized.invoke(main, ["plans", "list"])
        row = next(line for line in listed.output.splitlines() if line.startswith("1 "))

        assert "Exercises" in listed.output
        assert f" {plan.total_exercises} " in row

    def test_retire_and_restore_exercise(self, initialized):
        """Test taking an exercise out of the active catalog and back."""
        retired = initialized.invoke(main, ["exercises", "--retire", "kettlebell-swing"])
        assert retired.exit_code == 0
        assert "Retired 'kettlebell-swing'" in retired.output

        remaining = initialized.invoke(main, ["exercises", "-e", "kettlebell"])
        assert "kettlebell-swing" not in remaining.output
        assert "Total: 1 exercise(s)" in remaining.output

        everything = initialized.invoke(main, ["exercises", "--all"])
        assert "(retired)" in everything.output

        restored = initialized.invoke(main, ["exercises", "--restore", "kettlebell-swing"])
        assert "Restored" in restored.output
        again = initialized.invoke(main, ["exercises", "-e", "kettlebell"])
        assert "Total: 2 exercise(s)" in again.output

    def test_retire_unknown_exercise(self, initialized):
        """Test retiring an exercise that is not in the catalog."""
        result = initialized.invoke(main, ["exercises", "--retire", "nope"])

        assert result.exit_code == 1
        assert "not found" in result.output
