"""Bill of materials aggregation for arena layouts.

Walks every wall of a court and counts symbolic parts:

- Goal frames and hoops, one each per goal
- Bar, mesh and arch panels for each wall section
- Gates, chicane frames and mini goals for converted sections
- Posts at section boundaries, with shared corner posts on 90 degree courts

The calculation is a pure function of the court snapshot, so it can be
run again after every edit.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterator

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
from ..value_objects import BomLine, CornerType

__all__ = [
    "BillOfMaterials",
    "BomCalculator",
    "calculate_bom",
]

logger = logging.getLogger(__name__)

GOAL_FRAME = "Goal Frame"
BASKETBALL_HOOP = "Basketball Hoop"
ARCH_PANEL = "Arch Panel 2m"
MINI_GOAL = "Mini Goal 2m"
CHICANE_FRAME = "Chicane Frame 2m"
CURVED_CORNER_BAR_PANEL = "Curved Corner Bar Panel"
CURVED_CORNER_MESH_PANEL = "Curved Corner Mesh Panel"
CORNER_POST_PREFIX = "Corner Post"


def bar_panel(width: int) -> str:
    return f"Bar Panel {width}m"


def mesh_panel(width: int) -> str:
    return f"Mesh Panel {width}m"


def post(height: int) -> str:
    return f"Post {height}m"


def corner_post(height: int) -> str:
    return f"{CORNER_POST_PREFIX} {height}m"


def gate(height: int) -> str:
    return f"Gate {height}m (in 2m frame)"


@dataclass(frozen=True)
class BillOfMaterials:
    """Aggregated part counts for one court.

    Attributes:
        lines: One line per part name, sorted by name.
    """

    lines: tuple[BomLine, ...] = field(default_factory=tuple)

    @property
    def total_components(self) -> int:
        """Sum of all quantities."""
        return sum(line.quantity for line in self.lines)

    def quantity_of(self, name: str) -> int:
        """Return the quantity for ``name``, 0 when the part is not used."""
        for line in self.lines:
            if line.name == name:
                return line.quantity
        return 0

    def as_dict(self) -> dict[str, int]:
        return {line.name: line.quantity for line in self.lines}

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[BomLine]:
        return iter(self.lines)


class BomCalculator:
    """Derives a bill of materials from a court.

    Example:
        calculator = BomCalculator()
        bom = calculator.calculate(generate_court(10, 15, 3, 3))
        print(bom.quantity_of("Post 3m"))
    """

    def calculate(self, court: Court) -> BillOfMaterials:
        counts: dict[str, float] = defaultdict(float)

        goals = court.goal_count
        counts[GOAL_FRAME] += goals
        counts[BASKETBALL_HOOP] += goals

        for wall in court.walls:
            for section in wall.sections:
                self._add_section(counts, section)
        for wall in court.walls:
            self._add_posts(counts, court, wall)

        # Two walls share each corner post, each counting half of it.
        for name in counts:
            if name.startswith(CORNER_POST_PREFIX):
                counts[name] = math.ceil(counts[name])

        lines = tuple(
            BomLine(name=name, quantity=int(quantity))
            for name, quantity in sorted(counts.items())
            if quantity > 0
        )
        logger.debug(
            f"BOM for {court.description}: {len(lines)} part types, "
            f"{sum(line.quantity for line in lines)} components"
        )
        return BillOfMaterials(lines=lines)

    def _add_section(self, counts: dict[str, float], section: Section) -> None:
        if isinstance(section, Panel):
            counts[bar_panel(section.width)] += 1
            if section.arch is not None:
                mesh = section.arch.base_level - 1
                counts[ARCH_PANEL] += 1
            else:
                mesh = section.height - 1
            if mesh > 0:
                counts[mesh_panel(section.width)] += mesh
        elif isinstance(section, MiniGoal):
            counts[MINI_GOAL] += 1
        elif isinstance(section, Gate):
            counts[gate(section.leaf_height)] += 1
            self._add_mesh_above(counts, section.height - section.leaf_height)
        elif isinstance(section, Chicane):
            counts[CHICANE_FRAME] += 1
            counts[bar_panel(Chicane.width)] += Chicane.rebound_panels
            counts[post(section.frame_height)] += (
                Chicane.rebound_panels * Chicane.posts_per_rebound_panel
            )
            self._add_mesh_above(counts, section.height - section.frame_height)
        elif isinstance(section, CurvedCorner):
            counts[CURVED_CORNER_BAR_PANEL] += 1
            if section.height > 1:
                counts[CURVED_CORNER_MESH_PANEL] += section.height - 1

    @staticmethod
    def _add_mesh_above(counts: dict[str, float], mesh: int) -> None:
        if mesh > 0:
            counts[mesh_panel(2)] += mesh

    def _add_posts(self, counts: dict[str, float], court: Court, wall: Wall) -> None:
        """Count the posts standing at each section boundary of a wall.

        Boundaries touching a goal are skipped since the goal frame carries
        its own uprights. A post takes the height of the taller neighbour.
        """
        sections = wall.sections
        last = len(sections)
        shares_corners = (
            not court.is_standalone_end_wall and court.corner_type == CornerType.RIGHT_ANGLE
        )
        for i in range(last + 1):
            left = sections[i - 1] if i > 0 else None
            right = sections[i] if i < last else None
            if isinstance(left, Goal) or isinstance(right, Goal):
                continue
            height = max(
                left.height if left is not None else 0,
                right.height if right is not None else 0,
            )
            if height <= 0:
                continue

            if 0 < i < last:
                counts[post(height)] += 1
            elif shares_corners:
                counts[corner_post(height)] += 0.5
            elif not isinstance(left if i == last else right, CurvedCorner):
                counts[post(height)] += 1


def calculate_bom(court: Court) -> list[BomLine]:
    """Return the bill of materials for ``court`` as a list of lines."""
    return list(BomCalculator().calculate(court).lines)
