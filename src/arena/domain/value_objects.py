"""Dimensional constants, enums and small value objects for arena layouts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# All dimensions are in meters.
GOAL_WIDTH = 3
GOAL_HEIGHT = 3
CURVED_CORNER_SIZE = 0.5
MINI_GOAL_HEIGHT = 1

MIN_HEIGHT = 1
MAX_HEIGHT = 4
GOAL_ADJACENT_MAX_HEIGHT = 3

# Standard panel widths, largest first (the tiler relies on this order).
PANEL_WIDTHS: tuple[int, ...] = (2, 1)
CONVERTIBLE_WIDTH = 2

# A chicane needs this much wall between it and any goal frame.
CHICANE_CLEARANCE = 2

MIN_EVEN_WIDTH = 6
MIN_ODD_WIDTH = 5
MIN_LENGTH = 5

# Practical limits for a single enclosure.
MAX_WIDTH = 50
MAX_LENGTH = 80


class SectionKind(str, Enum):
    """Discriminator for the section variants."""

    PANEL = "panel"
    GOAL = "goal"
    CURVED_CORNER = "curved_corner"
    MINI_GOAL = "mini_goal"
    GATE = "gate"
    CHICANE = "chicane"


class CornerType(str, Enum):
    """How two meeting walls are joined.

    Attributes:
        CURVED: A 0.5m curved corner section closes each end of the end walls.
        RIGHT_ANGLE: Walls meet at a shared corner post.
    """

    CURVED = "curved"
    RIGHT_ANGLE = "right-angle"


class WallId(str, Enum):
    """Identifiers of the four walls of a court, in canonical order."""

    END1 = "end1"
    END2 = "end2"
    SIDE1 = "side1"
    SIDE2 = "side2"

    @property
    def is_end_wall(self) -> bool:
        return self in (WallId.END1, WallId.END2)

    @property
    def label(self) -> str:
        """Human readable wall name, e.g. "End Wall 1"."""
        prefix = "End Wall" if self.is_end_wall else "Side Wall"
        return f"{prefix} {self.value[-1]}"


class GoalSide(str, Enum):
    """Which side of a transition panel the goal is on."""

    LEFT = "left"
    RIGHT = "right"


class WallSide(str, Enum):
    """End of a wall that a section is appended to."""

    LEFT = "left"
    RIGHT = "right"


class SectionError(ValueError):
    """Raised when a section is constructed with illegal dimensions."""


@dataclass(frozen=True)
class ArchInfo:
    """Sloped transition between the goal frame and the general wall height.

    Attributes:
        base_level: Height of the shared bar level in meters.
        goal_height: Fill height of the third facing the goal.
        outer_height: Fill height of the third facing away from the goal.
        goal_side: Side of the panel the goal is on.
    """

    base_level: int
    goal_height: int
    outer_height: int
    goal_side: GoalSide

    def __post_init__(self) -> None:
        if self.base_level < MIN_HEIGHT:
            raise SectionError("Arch base level must be at least 1")
        if self.goal_height < 1 or self.outer_height < 1:
            raise SectionError("Arch fill heights must be positive")

    @classmethod
    def for_wall_height(cls, wall_height: int, goal_side: GoalSide) -> "ArchInfo | None":
        """Return the arch used against a goal for a given wall height.

        Only 2m and 4m walls get an arch; other heights return None.
        """
        if wall_height == 2:
            return cls(base_level=1, goal_height=2, outer_height=1, goal_side=goal_side)
        if wall_height == 4:
            return cls(base_level=2, goal_height=1, outer_height=2, goal_side=goal_side)
        return None


@dataclass(frozen=True)
class BomLine:
    """One row of a bill of materials."""

    name: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("BOM line name must not be empty")
        if self.quantity < 1:
            raise ValueError("BOM quantity must be at least 1")
