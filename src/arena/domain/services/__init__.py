"""Domain services for arena layout, editing and part counting.

This package provides:
- Panel tiling and wall generation
- Court generation from user dimensions
- Validated edit operations on a court
- Bill of materials aggregation
"""

from .bom import BillOfMaterials, BomCalculator, calculate_bom
from .court_generator import (
    CourtValidationError,
    corner_type_for_width,
    generate_court,
    generate_standalone_end_wall,
    minimum_width,
    validate_dimensions,
)
from .mutations import (
    MutationResult,
    append_curved_corner,
    append_section,
    set_section_height,
    set_wall_height,
    toggle_chicane,
    toggle_gate,
    toggle_mini_goal,
    try_append_curved_corner,
    try_append_section,
    try_set_section_height,
    try_set_wall_height,
    try_toggle_chicane,
    try_toggle_gate,
    try_toggle_mini_goal,
)
from .panel_tiler import tile
from .wall_generator import (
    corner_allowance,
    generate_end_wall,
    generate_side_wall,
    transition_panel,
)

__all__ = [
    "BillOfMaterials",
    "BomCalculator",
    "CourtValidationError",
    "MutationResult",
    "append_curved_corner",
    "append_section",
    "calculate_bom",
    "corner_allowance",
    "corner_type_for_width",
    "generate_court",
    "generate_end_wall",
    "generate_side_wall",
    "generate_standalone_end_wall",
    "minimum_width",
    "set_section_height",
    "set_wall_height",
    "tile",
    "toggle_chicane",
    "toggle_gate",
    "toggle_mini_goal",
    "transition_panel",
    "try_append_curved_corner",
    "try_append_section",
    "try_set_section_height",
    "try_set_wall_height",
    "try_toggle_chicane",
    "try_toggle_gate",
    "try_toggle_mini_goal",
    "validate_dimensions",
]
