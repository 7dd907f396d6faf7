"""Wall generation: end walls with a goal opening, and plain side walls."""

from __future__ import annotations

from dataclasses import replace

from ..entities import CurvedCorner, Goal, Panel, Section
from ..value_objects import (
    CONVERTIBLE_WIDTH,
    CURVED_CORNER_SIZE,
    GOAL_ADJACENT_MAX_HEIGHT,
    GOAL_WIDTH,
    ArchInfo,
    CornerType,
    GoalSide,
)
from .panel_tiler import tile

__all__ = [
    "corner_allowance",
    "generate_end_wall",
    "generate_side_wall",
    "transition_panel",
]


def corner_allowance(corner_type: CornerType | None) -> float:
    """Wall length taken up by the curved corners at both ends."""
    if corner_type == CornerType.CURVED:
        return 2 * CURVED_CORNER_SIZE
    return 0.0


def transition_panel(panel: Panel, end_height: int, goal_side: GoalSide) -> Panel:
    """Shape the panel that touches the goal frame.

    A 2m panel on a 2m or 4m wall becomes an arch stepping between the wall
    height and the 3m goal frame. Otherwise a panel against the goal never
    rises above the frame. A 1m panel on a 2m wall is left as tiled.
    """
    if panel.width == CONVERTIBLE_WIDTH:
        arch = ArchInfo.for_wall_height(end_height, goal_side)
        if arch is not None:
            return replace(panel, height=end_height, arch=arch)
    if end_height > GOAL_ADJACENT_MAX_HEIGHT:
        return replace(panel, height=GOAL_ADJACENT_MAX_HEIGHT)
    return panel


def generate_end_wall(
    court_width: float,
    end_height: int,
    corner_type: CornerType | None,
    side_height: int = 0,
) -> list[Section]:
    """Build an end wall: panel run, goal, panel run.

    With curved corners a corner section closes each end of the wall. The
    corners are as tall as the taller of the end and side walls, since they
    carry the side wall around to the end wall.

    Args:
        court_width: Width of the court in meters.
        end_height: General height of the end wall.
        corner_type: Corner style of the court.
        side_height: Height of the side walls; only used for corner height.

    Returns:
        Sections from the start of the wall to its end.
    """
    panel_space = (court_width - GOAL_WIDTH - corner_allowance(corner_type)) / 2

    left_run = tile(panel_space, end_height)
    if left_run:
        left_run[-1] = transition_panel(left_run[-1], end_height, GoalSide.RIGHT)

    right_run = tile(panel_space, end_height)
    if right_run:
        right_run[0] = transition_panel(right_run[0], end_height, GoalSide.LEFT)

    sections: list[Section] = [*left_run, Goal(), *right_run]
    if corner_type == CornerType.CURVED:
        corner_height = max(end_height, side_height)
        sections.insert(0, CurvedCorner(height=corner_height))
        sections.append(CurvedCorner(height=corner_height))
    return sections


def generate_side_wall(
    court_length: float,
    side_height: int,
    corner_type: CornerType | None,
) -> list[Section]:
    """Build a side wall as a single panel run.

    The curved corners belong to the end walls, so a curved court's side wall
    is shortened by the corner allowance.
    """
    return list(tile(court_length - corner_allowance(corner_type), side_height))
