"""Database engine setup and initialization."""

import json
import logging
import os
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

# Default data directory, overridable with GYM_PLANNER_DATA_DIR
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "GYM_PLANNER_DATA_DIR"


def get_data_dir() -> Path:
    """Get the data directory, honouring the environment override."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "gym_planner.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Exercise catalog; rowid order is the catalog order
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                description TEXT DEFAULT '',
                primary_muscle_groups TEXT NOT NULL,
                secondary_muscle_groups TEXT DEFAULT '[]',
                equipment_needed TEXT NOT NULL,
                difficulty INTEGER DEFAULT 1,
                is_compound INTEGER DEFAULT 0,
                is_active INTEGER DEFAULT 1
            )
        """)

        # Generated workout plans
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_plans (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                name TEXT NOT NULL,
                description TEXT DEFAULT '',
                duration INTEGER NOT NULL DEFAULT 4,
                workouts_per_week INTEGER NOT NULL,
                template_type TEXT NOT NULL,
                plan_structure TEXT NOT NULL,
                is_active INTEGER DEFAULT 1,
                started_at TIMESTAMP,
                completed_at TIMESTAMP,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_plans_user
            ON workout_plans(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_active
            ON exercises(is_active)
        """)

        await db.commit()

    logger.debug("Database schema ready at %s", db_path)


async def seed_exercises(db_path: Path | None = None) -> int:
    """Seed the database with the built-in exercise library.

    Existing exercises are left untouched.

    Returns:
        Number of exercises inserted
    """
    from ..models.exercises import COMMON_EXERCISES

    if db_path is None:
        db_path = get_db_path()

    count = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in COMMON_EXERCISES:
            data = exercise.to_dict()
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises
                (id, name, description, primary_muscle_groups, secondary_muscle_groups,
                 equipment_needed, difficulty, is_compound, is_active)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["name"],
                    data["description"],
                    json.dumps(data["primary_muscle_groups"]),
                    json.dumps(data["secondary_muscle_groups"]),
                    json.dumps(data["equipment_needed"]),
                    data["difficulty"],
                    1 if data["is_compound"] else 0,
                    1 if data["is_active"] else 0,
                ),
            )
            count += cursor.rowcount

        await db.commit()

    logger.info("Seeded %d exercises", count)
    return count
