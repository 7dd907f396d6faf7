"""Court generation from user dimensions."""

from __future__ import annotations

import logging

from ..entities import Court, Goal, Wall
from ..value_objects import (
    GOAL_HEIGHT,
    GOAL_WIDTH,
    MAX_HEIGHT,
    MIN_EVEN_WIDTH,
    MIN_HEIGHT,
    MIN_LENGTH,
    MIN_ODD_WIDTH,
    CornerType,
    WallId,
)
from .wall_generator import generate_end_wall, generate_side_wall

__all__ = [
    "CourtValidationError",
    "corner_type_for_width",
    "generate_court",
    "generate_standalone_end_wall",
    "minimum_width",
    "validate_dimensions",
]

logger = logging.getLogger(__name__)


class CourtValidationError(ValueError):
    """Raised when court dimensions are outside the buildable range.

    Attributes:
        errors: One message per violated constraint.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def corner_type_for_width(width: int) -> CornerType:
    """Even widths get curved corners, odd widths get 90 degree corners."""
    return CornerType.CURVED if width % 2 == 0 else CornerType.RIGHT_ANGLE


def minimum_width(width: int) -> int:
    """Smallest buildable width with the same parity as ``width``.

    An even court has to fit two curved corners, the goal and a 1m panel on
    each side; an odd court only the goal and the panels.
    """
    return MIN_EVEN_WIDTH if width % 2 == 0 else MIN_ODD_WIDTH


def validate_dimensions(
    width: int, length: int, end_height: int, side_height: int
) -> list[str]:
    """Check generator inputs and return a list of error messages."""
    errors: list[str] = []
    if isinstance(width, bool) or not float(width).is_integer():
        errors.append(f"Width must be a whole number of meters (got {width})")
    elif width < minimum_width(int(width)):
        parity = "even" if int(width) % 2 == 0 else "odd"
        errors.append(
            f"Width must be at least {minimum_width(int(width))}m for an {parity} width "
            f"(got {width})"
        )
    if isinstance(length, bool) or not float(length).is_integer():
        errors.append(f"Length must be a whole number of meters (got {length})")
    elif length < MIN_LENGTH:
        errors.append(f"Length must be at least {MIN_LENGTH}m (got {length})")
    for label, value in (("End wall", end_height), ("Side wall", side_height)):
        if not MIN_HEIGHT <= value <= MAX_HEIGHT or not float(value).is_integer():
            errors.append(
                f"{label} height must be a whole number between {MIN_HEIGHT} and "
                f"{MAX_HEIGHT} (got {value})"
            )
    return errors


def generate_court(width: int, length: int, end_height: int, side_height: int) -> Court:
    """Generate a full four-wall court.

    Both end walls are generated from the same inputs, as are both side
    walls. The corner style follows from the parity of the width.

    Raises:
        CourtValidationError: If any dimension is out of range.
    """
    errors = validate_dimensions(width, length, end_height, side_height)
    if errors:
        raise CourtValidationError(errors)

    width, length = int(width), int(length)
    end_height, side_height = int(end_height), int(side_height)
    corner_type = corner_type_for_width(width)

    walls = tuple(
        Wall(wall_id, generate_end_wall(width, end_height, corner_type, side_height))
        for wall_id in (WallId.END1, WallId.END2)
    ) + tuple(
        Wall(wall_id, generate_side_wall(length, side_height, corner_type))
        for wall_id in (WallId.SIDE1, WallId.SIDE2)
    )
    logger.debug(
        f"Generated {width}x{length} court with {corner_type.value} corners "
        f"({sum(len(w) for w in walls)} sections)"
    )
    return Court(
        width=width,
        length=length,
        corner_type=corner_type,
        end_wall_height=end_height,
        side_wall_height=side_height,
        walls=walls,
    )


def generate_standalone_end_wall() -> Court:
    """Start a standalone end wall from a lone goal.

    The result has a single wall, ``end1``, which is grown with the append
    operations of the mutation engine.
    """
    return Court(
        width=GOAL_WIDTH,
        length=0,
        corner_type=None,
        end_wall_height=GOAL_HEIGHT,
        side_wall_height=0,
        walls=(Wall(WallId.END1, (Goal(),)),),
        is_standalone_end_wall=True,
    )
