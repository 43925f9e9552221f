"""Workout plan routes."""

import logging
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from ...db.repositories import ExerciseRepository, WorkoutPlanRepository
from ...exceptions import (
    InsufficientEquipmentOrCatalog,
    InvalidRequest,
    PersistenceFailure,
)
from ...generator import PlanAssembler
from ...models.request import (
    MAX_TIME_PER_WORKOUT,
    MAX_WORKOUTS_PER_WEEK,
    MIN_TIME_PER_WORKOUT,
    MIN_WORKOUTS_PER_WEEK,
    PlanGenerationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


class GeneratePlanBody(BaseModel):
    """JSON body for plan generation."""

    user_id: str = Field(min_length=1)
    fitness_goals: list[str] = Field(min_length=1)
    experience_level: Literal["beginner", "intermediate", "advanced"]
    available_equipment: list[str] = Field(min_length=1)
    workouts_per_week: int = Field(ge=MIN_WORKOUTS_PER_WEEK, le=MAX_WORKOUTS_PER_WEEK)
    time_per_workout: int = Field(ge=MIN_TIME_PER_WORKOUT, le=MAX_TIME_PER_WORKOUT)

    def to_request(self) -> PlanGenerationRequest:
        return PlanGenerationRequest.from_dict(self.model_dump())


class PlanActionBody(BaseModel):
    """JSON body identifying the plan owner."""

    user_id: str = Field(min_length=1)


def get_db_path_for(request: Request) -> Path:
    """Get the database path from app state."""
    return request.app.state.db_path


@router.get("/plans")
async def list_plans(request: Request, user_id: str):
    """List a user's workout plans."""
    repo = WorkoutPlanRepository(get_db_path_for(request))
    plans = await repo.list_for_user(user_id)
    return {"success": True, "data": [plan.to_dict() for plan in plans]}


@router.get("/plans/{plan_id}")
async def get_plan(request: Request, plan_id: int, user_id: str):
    """Get a single workout plan."""
    repo = WorkoutPlanRepository(get_db_path_for(request))
    plan = await repo.get(plan_id)
    if plan is None or plan.user_id != user_id:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return {"success": True, "data": plan.to_dict()}


@router.post("/plans/generate")
async def generate_plan(request: Request, body: GeneratePlanBody):
    """Generate and store a new 4-week workout plan."""
    db_path = get_db_path_for(request)
    assembler = PlanAssembler(
        catalog=ExerciseRepository(db_path),
        store=WorkoutPlanRepository(db_path),
    )

    try:
        plan = await assembler.generate(body.to_request())
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except InsufficientEquipmentOrCatalog as e:
        raise HTTPException(
            status_code=422,
            detail=f"{e}. Select more equipment and try again.",
        ) from e
    except PersistenceFailure as e:
        logger.error("Error generating workout plan: %s", e)
        raise HTTPException(
            status_code=503,
            detail="Failed to generate workout plan, please try again",
        ) from e

    return {
        "success": True,
        "data": plan.to_dict(),
        "message": "Workout plan generated successfully",
    }


@router.post("/plans/{plan_id}/start")
async def start_plan(request: Request, plan_id: int, body: PlanActionBody):
    """Start a plan, deactivating the user's other plans."""
    repo = WorkoutPlanRepository(get_db_path_for(request))
    plan = await repo.start(plan_id, body.user_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return {
        "success": True,
        "data": plan.to_dict(),
        "message": "Workout plan started successfully",
    }


@router.post("/plans/{plan_id}/complete")
async def complete_plan(request: Request, plan_id: int, body: PlanActionBody):
    """Mark a plan as completed."""
    repo = WorkoutPlanRepository(get_db_path_for(request))
    plan = await repo.complete(plan_id, body.user_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return {
        "success": True,
        "data": plan.to_dict(),
        "message": "Workout plan completed",
    }


@router.delete("/plans/{plan_id}")
async def delete_plan(request: Request, plan_id: int, user_id: str):
    """Delete a plan."""
    repo = WorkoutPlanRepository(get_db_path_for(request))
    plan = await repo.get(plan_id)
    if plan is None or plan.user_id != user_id:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    await repo.delete(plan_id)
    return {"status": "deleted"}
