"""Tests for data models."""

from datetime import datetime

import pytest

from gym_planner.exceptions import InvalidRequest
from gym_planner.models.exercises import (
    COMMON_EXERCISES,
    EquipmentType,
    ExerciseCatalogEntry,
    MuscleGroup,
)
from gym_planner.models.plan import (
    GeneratedWeek,
    GeneratedWorkout,
    PlanExerciseEntry,
    TemplateType,
    WorkoutPlan,
)
from gym_planner.models.request import ExperienceLevel, PlanGenerationRequest


class TestExerciseCatalogEntry:
    """Tests for ExerciseCatalogEntry model."""

    def test_entry_to_dict(self):
        """Test entry serialization."""
        entry = ExerciseCatalogEntry(
            id="bench-press",
            name="Bench Press",
            primary_muscle_groups=frozenset({"chest"}),
            secondary_muscle_groups=frozenset({"triceps", "shoulders"}),
            equipment_needed=frozenset({"barbell", "bench"}),
            is_compound=True,
        )
        data = entry.to_dict()

        assert data["id"] == "bench-press"
        assert data["primary_muscle_groups"] == ["chest"]
        assert data["secondary_muscle_groups"] == ["shoulders", "triceps"]
        assert data["equipment_needed"] == ["barbell", "bench"]
        assert data["is_compound"] is True
        assert data["is_active"] is True

    def test_entry_from_dict(self):
        """Test entry deserialization."""
        data = {
            "id": "squat",
            "name": "Squat",
            "primary_muscle_groups": ["legs"],
            "equipment_needed": ["barbell", "squat_rack"],
            "is_compound": True,
        }
        entry = ExerciseCatalogEntry.from_dict(data)

        assert entry.primary_muscle_groups == frozenset({"legs"})
        assert entry.secondary_muscle_groups == frozenset()
        assert "squat_rack" in entry.equipment_needed
        assert entry.is_active is True

    def test_entry_requires_primary_muscle_group(self):
        """Test that an entry without primary groups is rejected."""
        with pytest.raises(ValueError):
            ExerciseCatalogEntry(
                id="nothing",
                name="Nothing",
                primary_muscle_groups=frozenset(),
                equipment_needed=frozenset({"barbell"}),
            )

    def test_entry_requires_equipment(self):
        """Test that an entry without equipment is rejected."""
        with pytest.raises(ValueError):
            ExerciseCatalogEntry(
                id="air",
                name="Air",
                primary_muscle_groups=frozenset({"chest"}),
                equipment_needed=frozenset(),
            )

    def test_common_exercises_populated(self):
        """Test that the seed library covers every muscle group and has unique IDs."""
        ids = [e.id for e in COMMON_EXERCISES]
        assert len(ids) == len(set(ids))

        covered = set().union(*(e.primary_muscle_groups for e in COMMON_EXERCISES))
        for group in MuscleGroup:
            assert group.value in covered

    def test_common_exercises_use_known_equipment(self):
        """Test that the seed library only references known equipment."""
        known = {eq.value for eq in EquipmentType}
        for exercise in COMMON_EXERCISES:
            assert exercise.equipment_needed <= known


class TestPlanGenerationRequest:
    """Tests for PlanGenerationRequest validation."""

    def _request(self, **overrides) -> PlanGenerationRequest:
        data = {
            "user_id": "u1",
            "fitness_goals": ("build_muscle",),
            "experience_level": ExperienceLevel.BEGINNER,
            "available_equipment": frozenset({"dumbbell"}),
            "workouts_per_week": 3,
            "time_per_workout": 45,
        }
        data.update(overrides)
        return PlanGenerationRequest(**data)

    def test_valid_request(self):
        """Test that a well-formed request passes."""
        self._request().validate()

    @pytest.mark.parametrize("days", [1, 7])
    def test_workouts_per_week_bounds(self, days):
        """Test out-of-range workouts per week."""
        with pytest.raises(InvalidRequest):
            self._request(workouts_per_week=days).validate()

    @pytest.mark.parametrize("minutes", [29, 121])
    def test_time_per_workout_bounds(self, minutes):
        """Test out-of-range session length."""
        with pytest.raises(InvalidRequest):
            self._request(time_per_workout=minutes).validate()

    def test_empty_goals_rejected(self):
        """Test that goals are required."""
        with pytest.raises(InvalidRequest):
            self._request(fitness_goals=()).validate()

    def test_empty_equipment_rejected(self):
        """Test that equipment is required."""
        with pytest.raises(InvalidRequest):
            self._request(available_equipment=frozenset()).validate()

    def test_from_dict_unknown_level(self):
        """Test that an unknown experience level is an invalid request."""
        data = self._request().to_dict()
        data["experience_level"] = "elite"
        with pytest.raises(InvalidRequest):
            PlanGenerationRequest.from_dict(data)

    def test_from_dict(self):
        """Test request deserialization keeps goal order."""
        data = self._request(fitness_goals=("build_muscle", "get_stronger")).to_dict()
        request = PlanGenerationRequest.from_dict(data)

        assert request.fitness_goals == ("build_muscle", "get_stronger")
        assert request.experience_level == ExperienceLevel.BEGINNER


class TestWorkoutPlan:
    """Tests for WorkoutPlan model."""

    def _plan(self) -> WorkoutPlan:
        return WorkoutPlan(
            user_id="u1",
            name="Strength Training Plan",
            description="4-week strength focused training program",
            workouts_per_week=1,
            template_type=TemplateType.STRENGTH,
            weeks=(
                GeneratedWeek(
                    week_number=1,
                    theme="Foundation Building",
                    workouts=(
                        GeneratedWorkout(
                            day=1,
                            name="Push",
                            estimated_duration=60,
                            exercises=(
                                PlanExerciseEntry(
                                    exercise_id="bench-press",
                                    sets=4,
                                    reps="3-6",
                                    rest_seconds=180,
                                    notes="Focus on form and technique",
                                ),
                            ),
                        ),
                    ),
                ),
            ),
            created_at=datetime(2024, 1, 15, 9, 30),
        )

    def test_plan_to_dict(self):
        """Test plan serialization."""
        data = self._plan().to_dict()

        assert data["template_type"] == "strength"
        assert data["created_at"] == "2024-01-15T09:30:00"
        assert data["started_at"] is None
        exercise = data["weeks"][0]["workouts"][0]["exercises"][0]
        assert exercise["exercise_id"] == "bench-press"
        assert exercise["reps"] == "3-6"
        assert exercise["weight"] is None

    def test_plan_from_dict(self):
        """Test plan deserialization."""
        plan = self._plan()
        restored = WorkoutPlan.from_dict(plan.to_dict())

        assert restored == plan

    def test_plan_summary(self):
        """Test plan summary generation."""
        summary = self._plan().get_summary()

        assert "Strength Training Plan" in summary
        assert "Week 1 - Foundation Building" in summary
        assert "bench-press: 4x3-6, rest 180s" in summary

    def test_total_exercises(self):
        """Test exercise counting."""
        assert self._plan().total_exercises == 1

    def test_entry_rejects_zero_sets(self):
        """Test that an exercise entry needs at least one set."""
        with pytest.raises(ValueError):
            PlanExerciseEntry(exercise_id="x", sets=0, reps="5", rest_seconds=60)

    def test_entry_rejects_negative_rest(self):
        """Test that rest cannot be negative."""
        with pytest.raises(ValueError):
            PlanExerciseEntry(exercise_id="x", sets=3, reps="5", rest_seconds=-1)
