"""Exercise catalog routes."""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Query, Request

from ...db.repositories import ExerciseRepository

router = APIRouter(prefix="/exercises", tags=["exercises"])


def get_db_path_for(request: Request) -> Path:
    """Get the database path from app state."""
    return request.app.state.db_path


@router.get("")
async def list_exercises(
    request: Request,
    equipment: list[str] = Query(default=[]),
):
    """List active exercises, optionally limited to the given equipment."""
    repo = ExerciseRepository(get_db_path_for(request))
    if equipment:
        exercises = await repo.query_active(frozenset(equipment))
    else:
        exercises = await repo.list_all()

    return {
        "success": True,
        "data": [ex.to_dict() for ex in exercises],
    }


@router.get("/{exercise_id}")
async def get_exercise(request: Request, exercise_id: str):
    """Get a single exercise."""
    repo = ExerciseRepository(get_db_path_for(request))
    exercise = await repo.get(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return {"success": True, "data": exercise.to_dict()}
