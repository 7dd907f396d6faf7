"""Unit tests for section variants, walls, courts and selections.

These tests verify:
- Section dimension validation and fixed class-level dimensions
- ArchInfo geometry per wall height
- Wall helpers (widths, goal adjacency, distance to goal)
- Court lookup and immutability
- Selection revalidation after edits
"""

import math

import pytest

from arena.domain import (
    ArchInfo,
    Chicane,
    CornerType,
    Court,
    CurvedCorner,
    Gate,
    Goal,
    GoalSide,
    MiniGoal,
    Panel,
    SectionError,
    SectionKind,
    Selection,
    Wall,
    WallId,
)
from arena.domain.services import append_section


class TestSections:
    """Tests for the section variants."""

    def test_panel_accepts_standard_widths(self) -> None:
        assert Panel(width=2, height=3).width == 2
        assert Panel(width=1, height=1).height == 1

    def test_panel_rejects_odd_width(self) -> None:
        with pytest.raises(SectionError) as exc_info:
            Panel(width=3, height=2)
        assert "width" in str(exc_info.value)

    @pytest.mark.parametrize("height", [0, 5])
    def test_panel_rejects_height_out_of_range(self, height: int) -> None:
        with pytest.raises(SectionError):
            Panel(width=2, height=height)

    def test_only_2m_panel_carries_arch(self) -> None:
        arch = ArchInfo.for_wall_height(2, GoalSide.RIGHT)
        assert Panel(width=2, height=2, arch=arch).has_arch
        with pytest.raises(SectionError):
            Panel(width=1, height=2, arch=arch)

    def test_section_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CurvedCorner(height=9)

    def test_fixed_dimensions(self) -> None:
        assert (Goal().width, Goal().height) == (3, 3)
        assert (MiniGoal().width, MiniGoal().height) == (2, 1)
        assert CurvedCorner(height=2).width == 0.5
        assert Gate(height=3).width == 2
        assert Chicane(height=3).width == 2

    def test_kind_tags(self) -> None:
        assert Goal().kind == SectionKind.GOAL
        assert CurvedCorner(height=1).kind == SectionKind.CURVED_CORNER
        assert MiniGoal().kind == SectionKind.MINI_GOAL

    def test_gate_leaf_is_at_most_2m(self) -> None:
        assert Gate(height=1).leaf_height == 1
        assert Gate(height=4).leaf_height == 2

    def test_sections_are_frozen(self) -> None:
        panel = Panel(width=2, height=3)
        with pytest.raises(AttributeError):
            panel.height = 4  # type: ignore


class TestArchInfo:
    """Tests for arch geometry selection."""

    def test_two_meter_wall(self) -> None:
        arch = ArchInfo.for_wall_height(2, GoalSide.LEFT)
        assert (arch.base_level, arch.goal_height, arch.outer_height) == (1, 2, 1)
        assert arch.goal_side == GoalSide.LEFT

    def test_four_meter_wall(self) -> None:
        arch = ArchInfo.for_wall_height(4, GoalSide.RIGHT)
        assert (arch.base_level, arch.goal_height, arch.outer_height) == (2, 1, 2)

    @pytest.mark.parametrize("height", [1, 3])
    def test_no_arch_for_other_heights(self, height: int) -> None:
        assert ArchInfo.for_wall_height(height, GoalSide.LEFT) is None


class TestWall:
    """Tests for Wall helpers."""

    def _wall(self) -> Wall:
        return Wall(
            WallId.END1,
            (
                CurvedCorner(height=3),
                Panel(width=2, height=3),
                Panel(width=2, height=3),
                Panel(width=1, height=3),
                Goal(),
                Panel(width=2, height=3),
            ),
        )

    def test_total_width(self) -> None:
        assert self._wall().total_width == 10.5

    def test_accepts_list_of_sections(self) -> None:
        wall = Wall(WallId.SIDE1, [Panel(width=2, height=1)])
        assert isinstance(wall.sections, tuple)

    def test_section_at_out_of_range(self) -> None:
        assert self._wall().section_at(6) is None
        assert self._wall().section_at(-1) is None

    def test_goal_adjacency(self) -> None:
        wall = self._wall()
        assert wall.is_adjacent_to_goal(3)
        assert wall.is_adjacent_to_goal(5)
        assert not wall.is_adjacent_to_goal(2)
        assert wall.height_cap(3) == 3
        assert wall.height_cap(1) == 4

    def test_distance_to_goal(self) -> None:
        wall = self._wall()
        assert wall.distance_to_goal(1) == 3
        assert wall.distance_to_goal(2) == 1
        assert wall.distance_to_goal(5) == 0

    def test_distance_without_goal_is_infinite(self) -> None:
        wall = Wall(WallId.SIDE1, (Panel(width=2, height=3),) * 3)
        assert math.isinf(wall.distance_to_goal(1))

    def test_with_section_returns_copy(self) -> None:
        wall = self._wall()
        changed = wall.with_section(1, Gate(height=3))
        assert isinstance(changed.sections[1], Gate)
        assert isinstance(wall.sections[1], Panel)


class TestCourt:
    """Tests for the Court aggregate."""

    def test_get_wall(self, curved_court: Court) -> None:
        assert curved_court.get_wall("side2").wall_id == WallId.SIDE2
        assert curved_court.wall_ids == [WallId.END1, WallId.END2, WallId.SIDE1, WallId.SIDE2]

    def test_get_missing_wall_raises(self, end_wall: Court) -> None:
        with pytest.raises(KeyError):
            end_wall.get_wall(WallId.SIDE1)

    def test_duplicate_wall_ids_rejected(self) -> None:
        wall = Wall(WallId.END1, (Goal(),))
        with pytest.raises(ValueError):
            Court(
                width=3,
                length=0,
                corner_type=None,
                end_wall_height=3,
                side_wall_height=0,
                walls=(wall, wall),
            )

    def test_goal_count(self, curved_court: Court, end_wall: Court) -> None:
        assert curved_court.goal_count == 2
        assert end_wall.goal_count == 1

    def test_description(self, curved_court: Court, right_angle_court: Court) -> None:
        assert curved_court.description == "10m x 15m, curved corners"
        assert "90" in right_angle_court.description
        assert right_angle_court.corner_type == CornerType.RIGHT_ANGLE


class TestSelection:
    """Tests for selection revalidation."""

    def test_selection_on_existing_section(self, curved_court: Court) -> None:
        selection = Selection(WallId.END1, 6)
        assert selection.revalidate(curved_court) is selection

    def test_selection_dropped_when_index_gone(self, curved_court: Court) -> None:
        assert Selection(WallId.END1, 7).revalidate(curved_court) is None

    def test_selection_dropped_when_wall_missing(self, end_wall: Court) -> None:
        assert Selection(WallId.SIDE1).revalidate(end_wall) is None

    def test_selection_becomes_valid_after_growth(self, end_wall: Court) -> None:
        selection = Selection(WallId.END1, 1)
        assert not selection.is_valid_for(end_wall)
        grown = append_section(end_wall, "right", 2, 3)
        assert selection.is_valid_for(grown)
