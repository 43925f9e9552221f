"""Test doubles for the generator collaborators."""

from dataclasses import replace

from gym_planner.models.exercises import ExerciseCatalogEntry
from gym_planner.models.plan import WorkoutPlan


def make_exercise(
    id: str,
    primary: set[str],
    equipment: set[str],
    is_compound: bool = False,
    is_active: bool = True,
    secondary: set[str] | None = None,
) -> ExerciseCatalogEntry:
    """Build a catalog entry with the name derived from the ID."""
    return ExerciseCatalogEntry(
        id=id,
        name=id.replace("-", " ").title(),
        primary_muscle_groups=frozenset(primary),
        secondary_muscle_groups=frozenset(secondary or set()),
        equipment_needed=frozenset(equipment),
        is_compound=is_compound,
        is_active=is_active,
    )


class InMemoryCatalog:
    """Exercise catalog backed by a list, recording each query."""

    def __init__(self, entries: list[ExerciseCatalogEntry]):
        self.entries = list(entries)
        self.queries: list[frozenset[str]] = []

    async def query_active(self, equipment_ids: frozenset[str]) -> list[ExerciseCatalogEntry]:
        self.queries.append(equipment_ids)
        return [
            e for e in self.entries
            if e.is_active and e.equipment_needed & equipment_ids
        ]


class InMemoryPlanStore:
    """Plan store that assigns sequential IDs."""

    def __init__(self):
        self.saved: list[WorkoutPlan] = []

    async def save(self, plan: WorkoutPlan) -> WorkoutPlan:
        stored = replace(plan, id=len(self.saved) + 1)
        self.saved.append(stored)
        return stored


class FailingPlanStore:
    """Plan store that always rejects the save."""

    async def save(self, plan: WorkoutPlan) -> WorkoutPlan:
        raise RuntimeError("database is locked")
