"""Text formatters for court layouts and bills of materials."""

from __future__ import annotations

from arena.domain import (
    BillOfMaterials,
    Chicane,
    Court,
    Gate,
    Panel,
    Section,
    Wall,
)


class WallScheduleFormatter:
    """Formats each wall of a court as a table of its sections.

    The Notes column carries arch geometry and the derived parts of gates
    and chicanes.
    """

    def format(self, court: Court) -> str:
        lines = [
            "WALL SCHEDULE",
            "=" * 70,
            court.description,
        ]
        for wall in court.walls:
            lines.append("")
            lines.extend(self.format_wall(wall))
        return "\n".join(lines)

    def format_wall(self, wall: Wall) -> list[str]:
        lines = [
            f"{wall.wall_id.label} ({wall.total_width:g}m, {len(wall)} sections)",
            f"{'#':<4} {'Type':<15} {'Width':<8} {'Height':<8} {'Notes'}",
            "-" * 70,
        ]
        for index, section in enumerate(wall.sections):
            lines.append(
                f"{index:<4} {section.kind.value:<15} {section.width:<8g} "
                f"{section.height:<8} {self._notes(section)}".rstrip()
            )
        return lines

    @staticmethod
    def _notes(section: Section) -> str:
        if isinstance(section, Panel) and section.arch is not None:
            arch = section.arch
            return (
                f"arch, base {arch.base_level}m, goal {arch.goal_side.value} "
                f"({arch.goal_height}/{arch.outer_height})"
            )
        if isinstance(section, Gate):
            return f"{section.leaf_height}m gate leaf"
        if isinstance(section, Chicane):
            return f"{Chicane.rebound_panels} rebound panels"
        return ""


class BomTableFormatter:
    """Formats a bill of materials as a component/quantity table."""

    def format(self, bom: BillOfMaterials) -> str:
        if not bom.lines:
            return "No components."

        width = max(30, max(len(line.name) for line in bom.lines))
        lines = [
            "COMPONENTS",
            "=" * (width + 8),
            f"{'Component':<{width}} {'Qty':>7}",
            "-" * (width + 8),
        ]
        for line in bom.lines:
            lines.append(f"{line.name:<{width}} {line.quantity:>7}")
        lines.append("-" * (width + 8))
        lines.append(f"{'TOTAL':<{width}} {bom.total_components:>7}")
        return "\n".join(lines)
