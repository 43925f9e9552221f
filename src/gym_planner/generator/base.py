"""Protocols for the generator's storage collaborators."""

from typing import Protocol, runtime_checkable

from ..models.exercises import ExerciseCatalogEntry
from ..models.plan import WorkoutPlan


@runtime_checkable
class ExerciseCatalogAccessor(Protocol):
    """Read access to the exercise catalog."""

    async def query_active(self, equipment_ids: frozenset[str]) -> list[ExerciseCatalogEntry]:
        """Return active exercises usable with any of the given equipment.

        Results must come back in a stable catalog order.
        """
        ...


@runtime_checkable
class PlanStore(Protocol):
    """Persistence for generated plans."""

    async def save(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Persist a plan and return the stored representation."""
        ...
