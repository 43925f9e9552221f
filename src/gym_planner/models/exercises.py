"""Exercise catalog definitions and metadata."""

from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle-group tags used by the catalog and the weekly splits."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CORE = "core"
    LEGS = "legs"
    GLUTES = "glutes"
    CALVES = "calves"


class EquipmentType(str, Enum):
    """Equipment identifiers an exercise can require."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    PULL_UP_BAR = "pull_up_bar"
    CABLE = "cable"
    SMITH_MACHINE = "smith_machine"
    BANDS = "bands"
    KETTLEBELL = "kettlebell"
    BENCH = "bench"
    SQUAT_RACK = "squat_rack"
    BODYWEIGHT = "bodyweight"
    MEDICINE_BALL = "medicine_ball"


@dataclass(frozen=True)
class ExerciseCatalogEntry:
    """An exercise as the plan generator sees it.

    Muscle groups and equipment are sets of plain string identifiers so
    that catalogs with their own vocabularies can be used unchanged.
    """

    id: str
    name: str
    primary_muscle_groups: frozenset[str]
    equipment_needed: frozenset[str]
    secondary_muscle_groups: frozenset[str] = field(default_factory=frozenset)
    is_compound: bool = False
    is_active: bool = True
    description: str = ""
    difficulty: int = 1  # 1-5 scale

    def __post_init__(self):
        if not self.primary_muscle_groups:
            raise ValueError(f"Exercise {self.id!r} needs at least one primary muscle group")
        if not self.equipment_needed:
            raise ValueError(f"Exercise {self.id!r} needs at least one equipment item")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "primary_muscle_groups": sorted(self.primary_muscle_groups),
            "secondary_muscle_groups": sorted(self.secondary_muscle_groups),
            "equipment_needed": sorted(self.equipment_needed),
            "is_compound": self.is_compound,
            "is_active": self.is_active,
            "description": self.description,
            "difficulty": self.difficulty,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseCatalogEntry":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            primary_muscle_groups=frozenset(data["primary_muscle_groups"]),
            secondary_muscle_groups=frozenset(data.get("secondary_muscle_groups", [])),
            equipment_needed=frozenset(data["equipment_needed"]),
            is_compound=data.get("is_compound", False),
            is_active=data.get("is_active", True),
            description=data.get("description", ""),
            difficulty=data.get("difficulty", 1),
        )


def _entry(
    id: str,
    name: str,
    primary: list[MuscleGroup],
    equipment: list[EquipmentType],
    secondary: list[MuscleGroup] | None = None,
    is_compound: bool = False,
    difficulty: int = 1,
    description: str = "",
) -> ExerciseCatalogEntry:
    return ExerciseCatalogEntry(
        id=id,
        name=name,
        primary_muscle_groups=frozenset(mg.value for mg in primary),
        secondary_muscle_groups=frozenset(mg.value for mg in secondary or []),
        equipment_needed=frozenset(eq.value for eq in equipment),
        is_compound=is_compound,
        difficulty=difficulty,
        description=description,
    )


# Seed library, in catalog order. Selection ties are broken by this order.
COMMON_EXERCISES: list[ExerciseCatalogEntry] = [
    # Chest
    _entry(
        "barbell-bench-press",
        "Barbell Bench Press",
        [MuscleGroup.CHEST],
        [EquipmentType.BARBELL, EquipmentType.BENCH],
        secondary=[MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS],
        is_compound=True,
        difficulty=3,
        description="Flat bench press with an Olympic barbell.",
    ),
    _entry(
        "incline-dumbbell-press",
        "Incline Dumbbell Press",
        [MuscleGroup.CHEST],
        [EquipmentType.DUMBBELL],
        secondary=[MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS],
        is_compound=True,
        difficulty=2,
    ),
    _entry(
        "push-up",
        "Push-up",
        [MuscleGroup.CHEST],
        [EquipmentType.BODYWEIGHT],
        secondary=[MuscleGroup.TRICEPS, MuscleGroup.CORE],
        is_compound=True,
        description="Standard push-up from the floor.",
    ),
    _entry(
        "dumbbell-fly",
        "Dumbbell Fly",
        [MuscleGroup.CHEST],
        [EquipmentType.DUMBBELL],
        difficulty=2,
    ),
    _entry(
        "cable-crossover",
        "Cable Crossover",
        [MuscleGroup.CHEST],
        [EquipmentType.CABLE],
        difficulty=2,
    ),
    # Back
    _entry(
        "deadlift",
        "Deadlift",
        [MuscleGroup.BACK, MuscleGroup.LEGS],
        [EquipmentType.BARBELL],
        secondary=[MuscleGroup.GLUTES, MuscleGroup.CORE],
        is_compound=True,
        difficulty=4,
        description="Conventional deadlift from the floor.",
    ),
    _entry(
        "barbell-row",
        "Barbell Bent-Over Row",
        [MuscleGroup.BACK],
        [EquipmentType.BARBELL],
        secondary=[MuscleGroup.BICEPS],
        is_compound=True,
        difficulty=3,
    ),
    _entry(
        "pull-up",
        "Pull-up",
        [MuscleGroup.BACK],
        [EquipmentType.PULL_UP_BAR],
        secondary=[MuscleGroup.BICEPS],
        is_compound=True,
        difficulty=3,
    ),
    _entry(
        "one-arm-dumbbell-row",
        "One-Arm Dumbbell Row",
        [MuscleGroup.BACK],
        [EquipmentType.DUMBBELL, EquipmentType.BENCH],
        secondary=[MuscleGroup.BICEPS],
        is_compound=True,
        difficulty=2,
    ),
    _entry(
        "lat-pulldown",
        "Lat Pulldown",
        [MuscleGroup.BACK],
        [EquipmentType.CABLE],
        secondary=[MuscleGroup.BICEPS],
        is_compound=True,
        difficulty=2,
    ),
    _entry(
        "straight-arm-pulldown",
        "Straight-Arm Pulldown",
        [MuscleGroup.BACK],
        [EquipmentType.CABLE],
        difficulty=2,
    ),
    # Shoulders
    _entry(
        "overhead-press",
        "Overhead Press",
        [MuscleGroup.SHOULDERS],
        [EquipmentType.BARBELL],
        secondary=[MuscleGroup.TRICEPS, MuscleGroup.CORE],
        is_compound=True,
        difficulty=3,
    ),
    _entry(
        "dumbbell-shoulder-press",
        "Dumbbell Shoulder Press",
        [MuscleGroup.SHOULDERS],
        [EquipmentType.DUMBBELL],
        secondary=[MuscleGroup.TRICEPS],
        is_compound=True,
        difficulty=2,
    ),
    _entry(
        "lateral-raise",
        "Lateral Raise",
        [MuscleGroup.SHOULDERS],
        [EquipmentType.DUMBBELL],
    ),
    _entry(
        "band-face-pull",
        "Band Face Pull",
        [MuscleGroup.SHOULDERS],
        [EquipmentType.BANDS, EquipmentType.CABLE],
        secondary=[MuscleGroup.BACK],
    ),
    # Arms
    _entry(
        "barbell-curl",
        "Barbell Curl",
        [MuscleGroup.BICEPS, MuscleGroup.ARMS],
        [EquipmentType.BARBELL],
    ),
    _entry(
        "dumbbell-hammer-curl",
        "Dumbbell Hammer Curl",
        [MuscleGroup.BICEPS, MuscleGroup.ARMS],
        [EquipmentType.DUMBBELL],
    ),
    _entry(
        "chin-up",
        "Chin-up",
        [MuscleGroup.BICEPS, MuscleGroup.BACK],
        [EquipmentType.PULL_UP_BAR],
        is_compound=True,
        difficulty=3,
    ),
    _entry(
        "close-grip-bench-press",
        "Close-Grip Bench Press",
        [MuscleGroup.TRICEPS, MuscleGroup.ARMS],
        [EquipmentType.BARBELL, EquipmentType.BENCH],
        secondary=[MuscleGroup.CHEST],
        is_compound=True,
        difficulty=3,
    ),
    _entry(
        "bench-dip",
        "Bench Dip",
        [MuscleGroup.TRICEPS, MuscleGroup.ARMS],
        [EquipmentType.BENCH, EquipmentType.BODYWEIGHT],
        secondary=[MuscleGroup.CHEST],
        is_compound=True,
    ),
    _entry(
        "cable-triceps-pushdown",
        "Cable Triceps Pushdown",
        [MuscleGroup.TRICEPS, MuscleGroup.ARMS],
        [EquipmentType.CABLE],
    ),
    _entry(
        "overhead-dumbbell-extension",
        "Overhead Dumbbell Extension",
        [MuscleGroup.TRICEPS, MuscleGroup.ARMS],
        [EquipmentType.DUMBBELL],
    ),
    # Core
    _entry(
        "plank",
        "Plank",
        [MuscleGroup.CORE],
        [EquipmentType.BODYWEIGHT],
    ),
    _entry(
        "hanging-leg-raise",
        "Hanging Leg Raise",
        [MuscleGroup.CORE],
        [EquipmentType.PULL_UP_BAR],
        difficulty=3,
    ),
    _entry(
        "medicine-ball-slam",
        "Medicine Ball Slam",
        [MuscleGroup.CORE],
        [EquipmentType.MEDICINE_BALL],
        secondary=[MuscleGroup.SHOULDERS],
        is_compound=True,
        difficulty=2,
    ),
    # Legs
    _entry(
        "barbell-back-squat",
        "Barbell Back Squat",
        [MuscleGroup.LEGS],
        [EquipmentType.BARBELL, EquipmentType.SQUAT_RACK],
        secondary=[MuscleGroup.GLUTES, MuscleGroup.CORE],
        is_compound=True,
        difficulty=3,
        description="High-bar back squat out of a rack.",
    ),
    _entry(
        "romanian-deadlift",
        "Romanian Deadlift",
        [MuscleGroup.LEGS, MuscleGroup.GLUTES],
        [EquipmentType.BARBELL, EquipmentType.DUMBBELL],
        is_compound=True,
        difficulty=3,
    ),
    _entry(
        "goblet-squat",
        "Goblet Squat",
        [MuscleGroup.LEGS],
        [EquipmentType.DUMBBELL, EquipmentType.KETTLEBELL],
        secondary=[MuscleGroup.GLUTES],
        is_compound=True,
        difficulty=2,
    ),
    _entry(
        "bodyweight-lunge",
        "Walking Lunge",
        [MuscleGroup.LEGS],
        [EquipmentType.BODYWEIGHT, EquipmentType.DUMBBELL],
        secondary=[MuscleGroup.GLUTES],
        is_compound=True,
    ),
    _entry(
        "kettlebell-swing",
        "Kettlebell Swing",
        [MuscleGroup.GLUTES],
        [EquipmentType.KETTLEBELL],
        secondary=[MuscleGroup.LEGS, MuscleGroup.CORE],
        is_compound=True,
        difficulty=2,
    ),
    _entry(
        "barbell-hip-thrust",
        "Barbell Hip Thrust",
        [MuscleGroup.GLUTES],
        [EquipmentType.BARBELL, EquipmentType.BENCH],
        difficulty=2,
    ),
    _entry(
        "glute-bridge",
        "Glute Bridge",
        [MuscleGroup.GLUTES],
        [EquipmentType.BODYWEIGHT],
    ),
    _entry(
        "standing-calf-raise",
        "Standing Calf Raise",
        [MuscleGroup.CALVES],
        [EquipmentType.BODYWEIGHT, EquipmentType.SMITH_MACHINE],
    ),
]
