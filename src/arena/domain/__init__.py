"""Domain layer - court model, generation, editing and part counting."""

from .entities import (
    Chicane,
    Court,
    CurvedCorner,
    Gate,
    Goal,
    MiniGoal,
    Panel,
    Section,
    Selection,
    Wall,
)
from .services import (
    BillOfMaterials,
    BomCalculator,
    CourtValidationError,
    MutationResult,
    calculate_bom,
    generate_court,
    generate_standalone_end_wall,
)
from .value_objects import (
    ArchInfo,
    BomLine,
    CornerType,
    GoalSide,
    SectionError,
    SectionKind,
    WallId,
    WallSide,
)

__all__ = [
    "ArchInfo",
    "BillOfMaterials",
    "BomCalculator",
    "BomLine",
    "Chicane",
    "CornerType",
    "Court",
    "CourtValidationError",
    "CurvedCorner",
    "Gate",
    "Goal",
    "GoalSide",
    "MiniGoal",
    "MutationResult",
    "Panel",
    "Section",
    "SectionError",
    "SectionKind",
    "Selection",
    "Wall",
    "WallId",
    "WallSide",
    "calculate_bom",
    "generate_court",
    "generate_standalone_end_wall",
]
