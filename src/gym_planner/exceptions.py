"""Plan generation exceptions."""


class PlanGenerationError(Exception):
    """Base exception for plan generation errors."""
    pass


class InvalidRequest(PlanGenerationError):
    """Raised when a generation request is structurally invalid."""
    pass


class InsufficientEquipmentOrCatalog(PlanGenerationError):
    """Raised when the catalog cannot cover the requested plan."""
    pass


class NoExercisesAvailable(InsufficientEquipmentOrCatalog):
    """Raised when no active exercise matches the available equipment."""

    def __init__(self, equipment_ids: frozenset[str]):
        super().__init__(
            f"No exercises available for equipment: {', '.join(sorted(equipment_ids)) or 'none'}"
        )
        self.equipment_ids = equipment_ids


class InsufficientDayCoverage(InsufficientEquipmentOrCatalog):
    """Raised when a training day has no exercise for its muscle groups."""

    def __init__(self, day_label: str, muscle_groups: frozenset[str]):
        super().__init__(
            f"No exercises available for '{day_label}' "
            f"(targets: {', '.join(sorted(muscle_groups))})"
        )
        self.day_label = day_label
        self.muscle_groups = muscle_groups


class PersistenceFailure(PlanGenerationError):
    """Raised when the plan store rejects a generated plan."""
    pass
