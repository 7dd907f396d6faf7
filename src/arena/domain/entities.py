"""Domain entities for arena construction.

A court is made of walls, and a wall is an ordered run of sections. Each
section variant is its own frozen dataclass so that illegal combinations
(a goal with an arch, a 1m gate) cannot be constructed. Fixed dimensions
live on the class rather than on the instance.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterator, Union

from .value_objects import (
    CONVERTIBLE_WIDTH,
    CURVED_CORNER_SIZE,
    GOAL_ADJACENT_MAX_HEIGHT,
    GOAL_HEIGHT,
    GOAL_WIDTH,
    MAX_HEIGHT,
    MIN_HEIGHT,
    MINI_GOAL_HEIGHT,
    PANEL_WIDTHS,
    ArchInfo,
    CornerType,
    SectionError,
    SectionKind,
    WallId,
)


def _check_height(height: int, label: str) -> None:
    if not MIN_HEIGHT <= height <= MAX_HEIGHT:
        raise SectionError(
            f"{label} height must be between {MIN_HEIGHT} and {MAX_HEIGHT} (got {height})"
        )


@dataclass(frozen=True)
class Panel:
    """A bar panel, optionally shaped as an arch next to a goal.

    Attributes:
        width: Panel width in meters (1 or 2).
        height: Overall height in meters. The bottom meter is the bar panel,
            every meter above it is a mesh panel.
        arch: Transition geometry, only set on a 2m panel touching a goal.
    """

    kind: ClassVar[SectionKind] = SectionKind.PANEL

    width: int
    height: int
    arch: ArchInfo | None = None

    def __post_init__(self) -> None:
        if self.width not in PANEL_WIDTHS:
            raise SectionError(f"Panel width must be one of {PANEL_WIDTHS} (got {self.width})")
        _check_height(self.height, "Panel")
        if self.arch is not None and self.width != CONVERTIBLE_WIDTH:
            raise SectionError("Only 2m panels can carry an arch")

    @property
    def has_arch(self) -> bool:
        return self.arch is not None


@dataclass(frozen=True)
class Goal:
    """Goal opening with its fixed 3m x 3m frame."""

    kind: ClassVar[SectionKind] = SectionKind.GOAL
    width: ClassVar[int] = GOAL_WIDTH
    height: ClassVar[int] = GOAL_HEIGHT


@dataclass(frozen=True)
class CurvedCorner:
    """Curved corner piece closing the end of a wall."""

    kind: ClassVar[SectionKind] = SectionKind.CURVED_CORNER
    width: ClassVar[float] = CURVED_CORNER_SIZE

    height: int

    def __post_init__(self) -> None:
        _check_height(self.height, "Curved corner")


@dataclass(frozen=True)
class MiniGoal:
    """Low 1m goal that replaces a 2m bar panel."""

    kind: ClassVar[SectionKind] = SectionKind.MINI_GOAL
    width: ClassVar[int] = CONVERTIBLE_WIDTH
    height: ClassVar[int] = MINI_GOAL_HEIGHT


@dataclass(frozen=True)
class Gate:
    """Access gate in a 2m frame, with mesh above the gate leaf."""

    kind: ClassVar[SectionKind] = SectionKind.GATE
    width: ClassVar[int] = CONVERTIBLE_WIDTH

    height: int

    def __post_init__(self) -> None:
        _check_height(self.height, "Gate")

    @property
    def leaf_height(self) -> int:
        """Height of the gate leaf itself; the frame is at most 2m tall."""
        return min(self.height, 2)


@dataclass(frozen=True)
class Chicane:
    """Wall opening screened by two offset 2m rebound panels.

    The rebound panels are not sections of the wall; they are derived from
    the chicane when counting parts.
    """

    kind: ClassVar[SectionKind] = SectionKind.CHICANE
    width: ClassVar[int] = CONVERTIBLE_WIDTH
    rebound_panels: ClassVar[int] = 2
    posts_per_rebound_panel: ClassVar[int] = 2

    height: int

    def __post_init__(self) -> None:
        _check_height(self.height, "Chicane")

    @property
    def frame_height(self) -> int:
        return min(self.height, 2)


Section = Union[Panel, Goal, CurvedCorner, MiniGoal, Gate, Chicane]


@dataclass(frozen=True)
class Wall:
    """An ordered run of sections, from the start of the wall to its end."""

    wall_id: WallId
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple.
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    @property
    def total_width(self) -> float:
        """Sum of all section widths in meters."""
        return sum(section.width for section in self.sections)

    @property
    def goal_count(self) -> int:
        return sum(1 for section in self.sections if isinstance(section, Goal))

    def section_at(self, index: int) -> Section | None:
        """Return the section at ``index`` or None when out of range."""
        if 0 <= index < len(self.sections):
            return self.sections[index]
        return None

    def is_adjacent_to_goal(self, index: int) -> bool:
        """Check whether the section at ``index`` touches a goal."""
        return isinstance(self.section_at(index - 1), Goal) or isinstance(
            self.section_at(index + 1), Goal
        )

    def height_cap(self, index: int) -> int:
        """Maximum height allowed for the section at ``index``."""
        if self.is_adjacent_to_goal(index):
            return GOAL_ADJACENT_MAX_HEIGHT
        return MAX_HEIGHT

    def distance_to_goal(self, index: int) -> float:
        """Wall length between the section at ``index`` and the nearest goal.

        Walks outward in both directions summing section widths until a goal
        or the end of the wall is reached. Returns ``math.inf`` when the wall
        has no goal on either side.
        """
        distances: list[float] = []
        for step in (-1, 1):
            run = 0.0
            i = index + step
            while 0 <= i < len(self.sections):
                section = self.sections[i]
                if isinstance(section, Goal):
                    distances.append(run)
                    break
                run += section.width
                i += step
        return min(distances) if distances else math.inf

    def with_section(self, index: int, section: Section) -> "Wall":
        """Return a copy of this wall with one section replaced."""
        sections = self.sections[:index] + (section,) + self.sections[index + 1 :]
        return replace(self, sections=sections)

    def with_sections(self, sections: tuple[Section, ...]) -> "Wall":
        return replace(self, sections=tuple(sections))


@dataclass(frozen=True)
class Court:
    """A complete enclosure: its walls, corner style and nominal dimensions.

    Attributes:
        width: Court width in meters (length of the end walls).
        length: Court length in meters; 0 for a standalone end wall.
        corner_type: Corner style, None for a standalone end wall.
        end_wall_height: Height the end walls were generated at.
        side_wall_height: Height the side walls were generated at.
        walls: Walls in canonical order (end1, end2, side1, side2).
        is_standalone_end_wall: True when the court is a single end wall
            being grown section by section.
    """

    width: float
    length: float
    corner_type: CornerType | None
    end_wall_height: int
    side_wall_height: int
    walls: tuple[Wall, ...]
    is_standalone_end_wall: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.walls, tuple):
            object.__setattr__(self, "walls", tuple(self.walls))
        ids = [wall.wall_id for wall in self.walls]
        if len(ids) != len(set(ids)):
            raise ValueError("Wall ids must be unique within a court")

    @property
    def wall_ids(self) -> list[WallId]:
        return [wall.wall_id for wall in self.walls]

    def has_wall(self, wall_id: WallId | str) -> bool:
        return WallId(wall_id) in self.wall_ids

    def get_wall(self, wall_id: WallId | str) -> Wall:
        """Look up a wall by id.

        Raises:
            KeyError: If the court has no such wall.
        """
        wall_id = WallId(wall_id)
        for wall in self.walls:
            if wall.wall_id == wall_id:
                return wall
        raise KeyError(f"Court has no wall '{wall_id.value}'")

    def with_wall(self, wall: Wall) -> "Court":
        """Return a copy of this court with one wall swapped for ``wall``."""
        walls = tuple(wall if w.wall_id == wall.wall_id else w for w in self.walls)
        return replace(self, walls=walls)

    @property
    def goal_count(self) -> int:
        return sum(wall.goal_count for wall in self.walls)

    @property
    def description(self) -> str:
        """Short summary such as "10m x 15m, curved corners"."""
        if self.is_standalone_end_wall:
            return f"End wall, {self.width:g}m wide"
        corners = "curved" if self.corner_type == CornerType.CURVED else "90°"
        return f"{self.width:g}m x {self.length:g}m, {corners} corners"


@dataclass(frozen=True)
class Selection:
    """A reference to a wall, or to one section of a wall, held by a UI.

    The core does not track selections; callers re-check them against each
    new court snapshot with :meth:`revalidate`.
    """

    wall_id: WallId
    index: int | None = None

    def is_valid_for(self, court: Court) -> bool:
        if not court.has_wall(self.wall_id):
            return False
        if self.index is None:
            return True
        return court.get_wall(self.wall_id).section_at(self.index) is not None

    def revalidate(self, court: Court) -> "Selection | None":
        """Return this selection if it still points at something, else None."""
        return self if self.is_valid_for(court) else None
