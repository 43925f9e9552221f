"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from gym_planner.models.request import ExperienceLevel, PlanGenerationRequest

from helpers import make_exercise


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def ppl_catalog():
    """Catalog with barbell compounds for every push/pull/legs muscle group."""
    return [
        make_exercise("bench-press", {"chest"}, {"barbell", "bench"}, is_compound=True),
        make_exercise("overhead-press", {"shoulders"}, {"barbell"}, is_compound=True),
        make_exercise("close-grip-bench", {"triceps"}, {"barbell", "bench"}, is_compound=True),
        make_exercise("skull-crusher", {"triceps"}, {"barbell", "bench"}),
        make_exercise("barbell-row", {"back"}, {"barbell"}, is_compound=True),
        make_exercise("barbell-curl", {"biceps"}, {"barbell"}),
        make_exercise("back-squat", {"legs"}, {"barbell"}, is_compound=True),
        make_exercise("hip-thrust", {"glutes"}, {"barbell", "bench"}),
        make_exercise("cable-fly", {"chest"}, {"cable"}),
        make_exercise("retired-press", {"chest"}, {"barbell"}, is_compound=True, is_active=False),
    ]


@pytest.fixture
def strength_request():
    """Three-day intermediate strength request with barbell and bench."""
    return PlanGenerationRequest(
        user_id="user-1",
        fitness_goals=("get_stronger",),
        experience_level=ExperienceLevel.INTERMEDIATE,
        available_equipment=frozenset({"barbell", "bench"}),
        workouts_per_week=3,
        time_per_workout=60,
    )
