"""Validated edit operations on a court.

Every operation takes a court and returns a new one. An edit that would
break a structural rule leaves the court untouched: the plain functions
return the input court, and the ``try_*`` forms also report why the edit
was refused. Courts are immutable, so the returned court never shares
mutable state with the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..entities import (
    Chicane,
    Court,
    CurvedCorner,
    Gate,
    Goal,
    MiniGoal,
    Panel,
    Section,
    Wall,
)
from ..value_objects import (
    CHICANE_CLEARANCE,
    CONVERTIBLE_WIDTH,
    GOAL_ADJACENT_MAX_HEIGHT,
    MAX_HEIGHT,
    MIN_HEIGHT,
    MINI_GOAL_HEIGHT,
    PANEL_WIDTHS,
    WallId,
    WallSide,
)

__all__ = [
    "MutationResult",
    "append_curved_corner",
    "append_section",
    "set_section_height",
    "set_wall_height",
    "toggle_chicane",
    "toggle_gate",
    "toggle_mini_goal",
    "try_append_curved_corner",
    "try_append_section",
    "try_set_section_height",
    "try_set_wall_height",
    "try_toggle_chicane",
    "try_toggle_gate",
    "try_toggle_mini_goal",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of an edit.

    Attributes:
        court: The new court, or the unchanged input when rejected.
        applied: Whether the edit took effect.
        reason: Why the edit was rejected, None when applied.
    """

    court: Court
    applied: bool
    reason: str | None = None

    @classmethod
    def ok(cls, court: Court) -> "MutationResult":
        return cls(court=court, applied=True)

    @classmethod
    def rejected(cls, court: Court, reason: str) -> "MutationResult":
        logger.debug(f"Edit rejected: {reason}")
        return cls(court=court, applied=False, reason=reason)


def _locate(court: Court, wall_id: WallId | str, index: int) -> tuple[Wall, Section] | str:
    """Find a section, or return a rejection reason."""
    try:
        wall = court.get_wall(wall_id)
    except (KeyError, ValueError):
        return f"no wall '{wall_id}'"
    section = wall.section_at(index)
    if section is None:
        return f"index {index} is out of range for {wall.wall_id.value} ({len(wall)} sections)"
    return wall, section


def _valid_height(height: int) -> bool:
    return isinstance(height, int) and not isinstance(height, bool) and (
        MIN_HEIGHT <= height <= MAX_HEIGHT
    )


def _replace_section(court: Court, wall: Wall, index: int, section: Section) -> Court:
    return court.with_wall(wall.with_section(index, section))


# ---------------------------------------------------------------------------
# Height edits
# ---------------------------------------------------------------------------


def try_set_section_height(
    court: Court, wall_id: WallId | str, index: int, height: int
) -> MutationResult:
    """Change the height of a single section.

    Goals, mini goals and arch panels have fixed heights. A section touching
    a goal may not exceed the 3m goal frame.
    """
    located = _locate(court, wall_id, index)
    if isinstance(located, str):
        return MutationResult.rejected(court, located)
    wall, section = located

    if isinstance(section, (Goal, MiniGoal)):
        return MutationResult.rejected(court, f"{section.kind.value} height is fixed")
    if isinstance(section, Panel) and section.has_arch:
        return MutationResult.rejected(court, "arch panel height is fixed")
    if not _valid_height(height):
        return MutationResult.rejected(
            court, f"height must be between {MIN_HEIGHT} and {MAX_HEIGHT} (got {height})"
        )
    cap = wall.height_cap(index)
    if height > cap:
        return MutationResult.rejected(court, f"height {height} exceeds the {cap}m cap here")
    return MutationResult.ok(_replace_section(court, wall, index, replace(section, height=height)))


def set_section_height(court: Court, wall_id: WallId | str, index: int, height: int) -> Court:
    return try_set_section_height(court, wall_id, index, height).court


def try_set_wall_height(court: Court, wall_id: WallId | str, height: int) -> MutationResult:
    """Apply one height to every adjustable section of a wall.

    Goals, mini goals and arch panels keep their heights. Sections touching
    a goal, curved corners included, are held to the goal frame height.
    """
    try:
        wall = court.get_wall(wall_id)
    except (KeyError, ValueError):
        return MutationResult.rejected(court, f"no wall '{wall_id}'")
    if not _valid_height(height):
        return MutationResult.rejected(
            court, f"height must be between {MIN_HEIGHT} and {MAX_HEIGHT} (got {height})"
        )

    sections: list[Section] = []
    for index, section in enumerate(wall.sections):
        if isinstance(section, (Goal, MiniGoal)) or (
            isinstance(section, Panel) and section.has_arch
        ):
            sections.append(section)
            continue
        sections.append(replace(section, height=min(height, wall.height_cap(index))))
    return MutationResult.ok(court.with_wall(wall.with_sections(tuple(sections))))


def set_wall_height(court: Court, wall_id: WallId | str, height: int) -> Court:
    return try_set_wall_height(court, wall_id, height).court


# ---------------------------------------------------------------------------
# Section conversions
# ---------------------------------------------------------------------------


def _convertible_panel(section: Section) -> str | None:
    """Return a rejection reason unless ``section`` is a 2m panel."""
    if not isinstance(section, Panel):
        return f"cannot convert a {section.kind.value}"
    if section.width != CONVERTIBLE_WIDTH:
        return f"only {CONVERTIBLE_WIDTH}m panels can be converted (got {section.width}m)"
    return None


def try_toggle_gate(court: Court, wall_id: WallId | str, index: int) -> MutationResult:
    """Turn a 2m panel into a gate, or a gate back into a panel.

    An arch panel next to the goal can be converted too. The arch is dropped
    and the gate is held to the goal frame height.
    """
    located = _locate(court, wall_id, index)
    if isinstance(located, str):
        return MutationResult.rejected(court, located)
    wall, section = located

    if isinstance(section, Gate):
        replacement: Section = Panel(width=CONVERTIBLE_WIDTH, height=section.height)
    else:
        reason = _convertible_panel(section)
        if reason:
            return MutationResult.rejected(court, reason)
        replacement = Gate(height=min(section.height, wall.height_cap(index)))
    return MutationResult.ok(_replace_section(court, wall, index, replacement))


def toggle_gate(court: Court, wall_id: WallId | str, index: int) -> Court:
    return try_toggle_gate(court, wall_id, index).court


def try_toggle_chicane(court: Court, wall_id: WallId | str, index: int) -> MutationResult:
    """Turn a 2m panel into a chicane, or a chicane back into a panel.

    The chicane's rebound panels stand off the wall, so there must be at
    least 2m of wall between the chicane and the nearest goal of the same
    wall. Arch panels are never converted.
    """
    located = _locate(court, wall_id, index)
    if isinstance(located, str):
        return MutationResult.rejected(court, located)
    wall, section = located

    if isinstance(section, Chicane):
        replacement: Section = Panel(width=CONVERTIBLE_WIDTH, height=section.height)
    else:
        reason = _convertible_panel(section)
        if reason:
            return MutationResult.rejected(court, reason)
        if section.has_arch:
            return MutationResult.rejected(court, "arch panels cannot become a chicane")
        distance = wall.distance_to_goal(index)
        if distance < CHICANE_CLEARANCE:
            return MutationResult.rejected(
                court,
                f"chicane needs {CHICANE_CLEARANCE}m clearance from the goal "
                f"(have {distance:g}m)",
            )
        replacement = Chicane(height=section.height)
    return MutationResult.ok(_replace_section(court, wall, index, replacement))


def toggle_chicane(court: Court, wall_id: WallId | str, index: int) -> Court:
    return try_toggle_chicane(court, wall_id, index).court


def try_toggle_mini_goal(court: Court, wall_id: WallId | str, index: int) -> MutationResult:
    """Swap a 2m panel for a mini goal, or a mini goal back to a panel.

    A reverted mini goal becomes a 1m high panel, the mini goal's own height.
    """
    located = _locate(court, wall_id, index)
    if isinstance(located, str):
        return MutationResult.rejected(court, located)
    wall, section = located

    if isinstance(section, MiniGoal):
        replacement: Section = Panel(
            width=CONVERTIBLE_WIDTH, height=MINI_GOAL_HEIGHT
        )
    else:
        reason = _convertible_panel(section)
        if reason:
            return MutationResult.rejected(court, reason)
        replacement = MiniGoal()
    return MutationResult.ok(_replace_section(court, wall, index, replacement))


def toggle_mini_goal(court: Court, wall_id: WallId | str, index: int) -> Court:
    return try_toggle_mini_goal(court, wall_id, index).court


# ---------------------------------------------------------------------------
# Standalone end wall growth
# ---------------------------------------------------------------------------


def _open_end(court: Court, side: WallSide | str) -> tuple[Wall, WallSide, Section | None] | str:
    """Find the end of a standalone end wall that a section would attach to.

    Returns the wall, the side and the section currently at that end, or a
    rejection reason.
    """
    if not court.is_standalone_end_wall:
        return "sections can only be added to a standalone end wall"
    try:
        side = WallSide(side)
    except ValueError:
        return f"unknown side '{side}'"
    wall = court.get_wall(WallId.END1)
    end: Section | None = None
    if wall.sections:
        end = wall.sections[0] if side == WallSide.LEFT else wall.sections[-1]
    if isinstance(end, CurvedCorner):
        return f"the {side.value} end is closed by a curved corner"
    return wall, side, end


def _check_append_height(height: int, next_to_goal: bool) -> str | None:
    if not _valid_height(height):
        return f"height must be between {MIN_HEIGHT} and {MAX_HEIGHT} (got {height})"
    if next_to_goal and height > GOAL_ADJACENT_MAX_HEIGHT:
        return f"height {height} exceeds the {GOAL_ADJACENT_MAX_HEIGHT}m cap next to the goal"
    return None


def _attach(court: Court, wall: Wall, side: WallSide, section: Section) -> Court:
    if side == WallSide.LEFT:
        new_wall = wall.with_sections((section,) + wall.sections)
    else:
        new_wall = wall.with_sections(wall.sections + (section,))
    return replace(court.with_wall(new_wall), width=new_wall.total_width)


def try_append_section(
    court: Court, side: WallSide | str, width: int, height: int
) -> MutationResult:
    """Add a panel to one end of a standalone end wall.

    The court width is recomputed from the new section list.
    """
    located = _open_end(court, side)
    if isinstance(located, str):
        return MutationResult.rejected(court, located)
    wall, side, end = located

    if width not in PANEL_WIDTHS:
        return MutationResult.rejected(
            court, f"panel width must be one of {PANEL_WIDTHS} (got {width})"
        )
    reason = _check_append_height(height, isinstance(end, Goal))
    if reason:
        return MutationResult.rejected(court, reason)
    return MutationResult.ok(_attach(court, wall, side, Panel(width=int(width), height=height)))


def append_section(court: Court, side: WallSide | str, width: int, height: int) -> Court:
    return try_append_section(court, side, width, height).court


def try_append_curved_corner(court: Court, side: WallSide | str, height: int) -> MutationResult:
    """Close one end of a standalone end wall with a curved corner.

    A corner cannot be placed directly against the goal.
    """
    located = _open_end(court, side)
    if isinstance(located, str):
        return MutationResult.rejected(court, located)
    wall, side, end = located

    if isinstance(end, Goal):
        return MutationResult.rejected(court, "a curved corner cannot sit directly against the goal")
    reason = _check_append_height(height, next_to_goal=False)
    if reason:
        return MutationResult.rejected(court, reason)
    return MutationResult.ok(_attach(court, wall, side, CurvedCorner(height=height)))


def append_curved_corner(court: Court, side: WallSide | str, height: int) -> Court:
    return try_append_curved_corner(court, side, height).court
