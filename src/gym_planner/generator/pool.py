"""Exercise pool loading."""

import logging

from ..models.exercises import ExerciseCatalogEntry
from .base import ExerciseCatalogAccessor

logger = logging.getLogger(__name__)


class ExercisePoolLoader:
    """Loads the exercises a user can perform with their equipment."""

    def __init__(self, catalog: ExerciseCatalogAccessor):
        self.catalog = catalog

    async def load(self, equipment_ids: frozenset[str]) -> list[ExerciseCatalogEntry]:
        """Load active exercises usable with the available equipment.

        An exercise is usable if ANY of its equipment requirements is
        available. Catalog order is preserved.

        Args:
            equipment_ids: Equipment the user has access to

        Returns:
            Filtered exercises, empty if nothing matches
        """
        equipment_ids = frozenset(equipment_ids)
        if not equipment_ids:
            logger.info("No equipment supplied, exercise pool is empty")
            return []

        entries = await self.catalog.query_active(equipment_ids)
        pool = [
            entry for entry in entries
            if entry.is_active and entry.equipment_needed & equipment_ids
        ]
        logger.debug(
            "Loaded %d of %d catalog exercises for equipment %s",
            len(pool), len(entries), sorted(equipment_ids),
        )
        return pool
