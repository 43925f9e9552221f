"""Tests for the SQLite repositories."""

import asyncio
from datetime import datetime

import pytest

from gym_planner.db.engine import init_db, seed_exercises
from gym_planner.db.repositories import ExerciseRepository, WorkoutPlanRepository
from gym_planner.generator import PlanAssembler
from gym_planner.models.exercises import COMMON_EXERCISES


@pytest.fixture
def seeded_db(temp_db_path):
    """Database with the schema and the built-in catalog."""
    asyncio.run(init_db(temp_db_path))
    asyncio.run(seed_exercises(temp_db_path))
    return temp_db_path


@pytest.fixture
def saved_plan(seeded_db, strength_request):
    """A strength plan generated against the seeded catalog and stored."""
    assembler = PlanAssembler(
        ExerciseRepository(seeded_db), WorkoutPlanRepository(seeded_db)
    )
    return asyncio.run(assembler.generate(strength_request))


class TestExerciseRepository:
    """Tests for ExerciseRepository."""

    def test_seed_is_idempotent(self, seeded_db):
        """Test that reseeding inserts nothing new."""
        assert asyncio.run(seed_exercises(seeded_db)) == 0

    def test_list_all_in_catalog_order(self, seeded_db):
        """Test that exercises come back in seed order."""
        entries = asyncio.run(ExerciseRepository(seeded_db).list_all())

        assert [e.id for e in entries] == [e.id for e in COMMON_EXERCISES]

    def test_seeded_entry_reads_back(self, seeded_db):
        """Test that a seeded exercise reads back unchanged."""
        expected = next(e for e in COMMON_EXERCISES if e.id == "barbell-back-squat")

        assert asyncio.run(ExerciseRepository(seeded_db).get("barbell-back-squat")) == expected

    def test_get_missing(self, seeded_db):
        """Test lookup of an unknown exercise."""
        assert asyncio.run(ExerciseRepository(seeded_db).get("nope")) is None

    def test_query_active_by_equipment(self, seeded_db):
        """Test that an exercise matches if any of its equipment is available."""
        entries = asyncio.run(ExerciseRepository(seeded_db).query_active(frozenset({"kettlebell"})))

        assert {e.id for e in entries} == {"goblet-squat", "kettlebell-swing"}

    def test_retired_exercise_hidden(self, seeded_db):
        """Test that retired exercises drop out of active queries."""
        repo = ExerciseRepository(seeded_db)

        assert asyncio.run(repo.set_active("kettlebell-swing", False)) is True
        entries = asyncio.run(repo.query_active(frozenset({"kettlebell"})))
        everything = asyncio.run(repo.list_all(include_inactive=True))

        assert [e.id for e in entries] == ["goblet-squat"]
        assert "kettlebell-swing" in {e.id for e in everything}

    def test_set_active_unknown(self, seeded_db):
        """Test retiring an exercise that does not exist."""
        assert asyncio.run(ExerciseRepository(seeded_db).set_active("nope", False)) is False

    def test_query_without_equipment(self, seeded_db):
        """Test that an empty equipment set matches nothing."""
        assert asyncio.run(ExerciseRepository(seeded_db).query_active(frozenset())) == []


class TestWorkoutPlanRepository:
    """Tests for WorkoutPlanRepository."""

    def test_save_assigns_id_and_timestamp(self, saved_plan):
        """Test that saving stamps an ID and creation time."""
        assert saved_plan.id is not None
        assert isinstance(saved_plan.created_at, datetime)

    def test_saved_plan_reads_back(self, seeded_db, saved_plan):
        """Test that the stored plan structure survives a round trip."""
        loaded = asyncio.run(WorkoutPlanRepository(seeded_db).get(saved_plan.id))

        assert loaded == saved_plan

    def test_save_rejects_stored_plan(self, seeded_db, saved_plan):
        """Test that a plan cannot be inserted twice."""
        with pytest.raises(ValueError):
            asyncio.run(WorkoutPlanRepository(seeded_db).save(saved_plan))

    def test_list_for_user(self, seeded_db, saved_plan):
        """Test per-user listing."""
        repo = WorkoutPlanRepository(seeded_db)

        assert [p.id for p in asyncio.run(repo.list_for_user("user-1"))] == [saved_plan.id]
        assert asyncio.run(repo.list_for_user("someone-else")) == []

    def test_start_deactivates_other_plans(self, seeded_db, saved_plan, strength_request):
        """Test that starting a plan leaves it as the user's only active plan."""
        repo = WorkoutPlanRepository(seeded_db)
        assembler = PlanAssembler(ExerciseRepository(seeded_db), repo)
        second = asyncio.run(assembler.generate(strength_request))

        started = asyncio.run(repo.start(saved_plan.id, "user-1"))

        assert started.is_active is True
        assert started.started_at is not None
        assert asyncio.run(repo.get(second.id)).is_active is False

    def test_start_wrong_user(self, seeded_db, saved_plan):
        """Test that another user's plan cannot be started."""
        assert asyncio.run(WorkoutPlanRepository(seeded_db).start(saved_plan.id, "intruder")) is None

    def test_complete(self, seeded_db, saved_plan):
        """Test completing a plan."""
        repo = WorkoutPlanRepository(seeded_db)
        completed = asyncio.run(repo.complete(saved_plan.id, "user-1"))

        assert completed.is_active is False
        assert completed.completed_at is not None
        assert asyncio.run(repo.complete(saved_plan.id, "intruder")) is None

    def test_delete(self, seeded_db, saved_plan):
        """Test deleting a plan."""
        repo = WorkoutPlanRepository(seeded_db)

        assert asyncio.run(repo.delete(saved_plan.id)) is True
        assert asyncio.run(repo.get(saved_plan.id)) is None
        assert asyncio.run(repo.delete(saved_plan.id)) is False
