"""Data access layer for gym-planner."""

import json
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.exercises import ExerciseCatalogEntry
from ..models.plan import GeneratedWeek, TemplateType, WorkoutPlan
from .engine import get_db_path


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def query_active(self, equipment_ids: frozenset[str]) -> list[ExerciseCatalogEntry]:
        """Get active exercises that can be performed with the given equipment."""
        if not equipment_ids:
            return []
        filtered = []
        for exercise in await self.list_all():
            # Exercise is available if ANY of its equipment options is available
            if exercise.equipment_needed & equipment_ids:
                filtered.append(exercise)
        return filtered

    async def list_all(self, include_inactive: bool = False) -> list[ExerciseCatalogEntry]:
        """List exercises in catalog order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if include_inactive:
                cursor = await db.execute("SELECT * FROM exercises ORDER BY rowid")
            else:
                cursor = await db.execute(
                    "SELECT * FROM exercises WHERE is_active = 1 ORDER BY rowid"
                )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get(self, exercise_id: str) -> ExerciseCatalogEntry | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def set_active(self, exercise_id: str, is_active: bool) -> bool:
        """Activate or retire an exercise. Returns False if it does not exist."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE exercises SET is_active = ? WHERE id = ?",
                (1 if is_active else 0, exercise_id),
            )
            await db.commit()
            return cursor.rowcount > 0

    def _row_to_exercise(self, row: aiosqlite.Row) -> ExerciseCatalogEntry:
        """Convert a database row to an ExerciseCatalogEntry."""
        return ExerciseCatalogEntry(
            id=row["id"],
            name=row["name"],
            description=row["description"] or "",
            primary_muscle_groups=frozenset(json.loads(row["primary_muscle_groups"])),
            secondary_muscle_groups=frozenset(json.loads(row["secondary_muscle_groups"] or "[]")),
            equipment_needed=frozenset(json.loads(row["equipment_needed"])),
            difficulty=row["difficulty"],
            is_compound=bool(row["is_compound"]),
            is_active=bool(row["is_active"]),
        )


class WorkoutPlanRepository:
    """Repository for generated workout plans."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def save(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert a new plan and return it with its ID and creation time."""
        if plan.id is not None:
            raise ValueError(f"Plan {plan.id} is already stored")
        created_at = plan.created_at or datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_plans
                (user_id, name, description, duration, workouts_per_week, template_type,
                 plan_structure, is_active, started_at, completed_at, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    plan.user_id,
                    plan.name,
                    plan.description,
                    plan.duration_weeks,
                    plan.workouts_per_week,
                    plan.template_type.value,
                    json.dumps({"weeks": [week.to_dict() for week in plan.weeks]}),
                    1 if plan.is_active else 0,
                    plan.started_at.isoformat() if plan.started_at else None,
                    plan.completed_at.isoformat() if plan.completed_at else None,
                    created_at.isoformat(),
                ),
            )
            await db.commit()
            return replace(plan, id=cursor.lastrowid, created_at=created_at)

    async def get(self, plan_id: int) -> WorkoutPlan | None:
        """Get a plan by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_plans WHERE id = ?", (plan_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_plan(row)

    async def list_for_user(self, user_id: str) -> list[WorkoutPlan]:
        """List a user's plans, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_plans WHERE user_id = ? ORDER BY created_at DESC, id DESC",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_plan(row) for row in rows]

    async def list_all(self) -> list[WorkoutPlan]:
        """List all plans, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_plans ORDER BY created_at DESC, id DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_plan(row) for row in rows]

    async def start(self, plan_id: int, user_id: str) -> WorkoutPlan | None:
        """Make a plan the user's only active plan and stamp its start time.

        Returns None if the plan does not exist or belongs to another user.
        """
        started_at = datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT id FROM workout_plans WHERE id = ? AND user_id = ?",
                (plan_id, user_id),
            )
            if await cursor.fetchone() is None:
                return None

            # Deactivate any currently active plans
            await db.execute(
                "UPDATE workout_plans SET is_active = 0 WHERE user_id = ?", (user_id,)
            )
            await db.execute(
                """
                UPDATE workout_plans SET
                    is_active = 1, started_at = ?, completed_at = NULL
                WHERE id = ?
                """,
                (started_at.isoformat(), plan_id),
            )
            await db.commit()
        return await self.get(plan_id)

    async def complete(self, plan_id: int, user_id: str) -> WorkoutPlan | None:
        """Mark a plan as completed. Returns None if not found for the user."""
        completed_at = datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE workout_plans SET
                    is_active = 0, completed_at = ?
                WHERE id = ? AND user_id = ?
                """,
                (completed_at.isoformat(), plan_id, user_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                return None
        return await self.get(plan_id)

    async def delete(self, plan_id: int) -> bool:
        """Delete a plan. Returns False if it did not exist."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM workout_plans WHERE id = ?", (plan_id,))
            await db.commit()
            return cursor.rowcount > 0

    def _row_to_plan(self, row: aiosqlite.Row) -> WorkoutPlan:
        """Convert a database row to a WorkoutPlan."""
        structure = json.loads(row["plan_structure"])
        return WorkoutPlan(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            description=row["description"] or "",
            duration_weeks=row["duration"],
            workouts_per_week=row["workouts_per_week"],
            template_type=TemplateType(row["template_type"]),
            weeks=tuple(GeneratedWeek.from_dict(week) for week in structure.get("weeks", [])),
            is_active=bool(row["is_active"]),
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
            started_at=datetime.fromisoformat(row["started_at"]) if row["started_at"] else None,
            completed_at=datetime.fromisoformat(row["completed_at"]) if row["completed_at"] else None,
        )
