"""Unit tests for panel tiling, wall generation and court generation."""

import pytest

from arena.domain import (
    ArchInfo,
    CornerType,
    Court,
    CourtValidationError,
    CurvedCorner,
    Goal,
    GoalSide,
    Panel,
    WallId,
    generate_court,
)
from arena.domain.services import (
    corner_allowance,
    generate_end_wall,
    generate_side_wall,
    tile,
    transition_panel,
    validate_dimensions,
)


class TestPanelTiler:
    """Tests for greedy panel tiling."""

    def test_even_span(self) -> None:
        assert tile(6, 3) == [Panel(width=2, height=3)] * 3

    def test_odd_span_ends_with_1m_panel(self) -> None:
        assert [p.width for p in tile(5, 2)] == [2, 2, 1]

    def test_fractional_remainder_dropped(self) -> None:
        assert [p.width for p in tile(3.5, 1)] == [2, 1]
        assert tile(0.5, 1) == []

    def test_all_panels_share_height(self) -> None:
        assert {p.height for p in tile(9, 4)} == {4}


class TestWallGenerator:
    """Tests for end and side wall generation."""

    def test_corner_allowance(self) -> None:
        assert corner_allowance(CornerType.CURVED) == 1.0
        assert corner_allowance(CornerType.RIGHT_ANGLE) == 0.0

    def test_curved_end_wall(self) -> None:
        sections = generate_end_wall(10, 3, CornerType.CURVED, 3)
        assert sections == [
            CurvedCorner(height=3),
            Panel(width=2, height=3),
            Panel(width=1, height=3),
            Goal(),
            Panel(width=2, height=3),
            Panel(width=1, height=3),
            CurvedCorner(height=3),
        ]

    def test_corner_height_follows_taller_wall(self) -> None:
        sections = generate_end_wall(10, 2, CornerType.CURVED, 4)
        assert sections[0] == CurvedCorner(height=4)
        assert sections[-1] == CurvedCorner(height=4)

    def test_right_angle_end_wall_has_no_corners(self) -> None:
        sections = generate_end_wall(7, 3, CornerType.RIGHT_ANGLE)
        assert sections == [Panel(width=2, height=3), Goal(), Panel(width=2, height=3)]

    def test_arch_on_2m_wall(self) -> None:
        sections = generate_end_wall(10, 2, CornerType.CURVED, 2)
        # The right run starts with a 2m panel against the goal.
        assert sections[4].arch == ArchInfo(1, 2, 1, GoalSide.LEFT)
        assert sections[4].height == 2
        # A 1m panel against the goal never gets an arch.
        assert sections[2] == Panel(width=1, height=2)

    def test_arch_on_4m_wall(self) -> None:
        sections = generate_end_wall(10, 4, CornerType.CURVED, 4)
        assert sections[4].arch == ArchInfo(2, 1, 2, GoalSide.LEFT)
        assert sections[4].height == 4

    def test_1m_panel_clamped_next_to_goal_on_4m_wall(self) -> None:
        sections = generate_end_wall(10, 4, CornerType.CURVED, 4)
        assert sections[2] == Panel(width=1, height=3)

    def test_left_run_arch_faces_right(self) -> None:
        sections = generate_end_wall(11, 2, CornerType.RIGHT_ANGLE)
        # (11 - 3) / 2 = 4 -> two 2m panels per side.
        assert sections[1].arch.goal_side == GoalSide.RIGHT
        assert sections[3].arch.goal_side == GoalSide.LEFT

    def test_transition_leaves_3m_panel_alone(self) -> None:
        panel = Panel(width=2, height=3)
        assert transition_panel(panel, 3, GoalSide.LEFT) is panel

    def test_side_wall_shortened_by_corners(self) -> None:
        assert len(generate_side_wall(15, 3, CornerType.CURVED)) == 7
        assert [p.width for p in generate_side_wall(5, 3, CornerType.RIGHT_ANGLE)] == [2, 2, 1]


class TestCourtGenerator:
    """Tests for full court generation."""

    def test_curved_court_layout(self, curved_court: Court) -> None:
        end1 = curved_court.get_wall(WallId.END1)
        assert [type(s).__name__ for s in end1] == [
            "CurvedCorner",
            "Panel",
            "Panel",
            "Goal",
            "Panel",
            "Panel",
            "CurvedCorner",
        ]
        assert [s.width for s in end1] == [0.5, 2, 1, 3, 2, 1, 0.5]
        assert all(s.height == 3 for s in end1)

    def test_corner_type_follows_parity(self, curved_court: Court, right_angle_court: Court) -> None:
        assert curved_court.corner_type == CornerType.CURVED
        assert right_angle_court.corner_type == CornerType.RIGHT_ANGLE

    @pytest.mark.parametrize("width", [5, 6, 7, 8, 9, 10, 13, 22, 31, 50])
    def test_end_wall_widths_sum_to_court_width(self, width: int) -> None:
        court = generate_court(width, 20, 3, 3)
        for wall_id in (WallId.END1, WallId.END2):
            assert court.get_wall(wall_id).total_width == width

    @pytest.mark.parametrize("width", [6, 9])
    def test_side_wall_widths_sum_to_court_length(self, width: int) -> None:
        court = generate_court(width, 21, 3, 3)
        assert court.get_wall(WallId.SIDE1).total_width + corner_allowance(
            court.corner_type
        ) == 21

    def test_one_goal_per_end_wall_and_none_on_sides(self, curved_court: Court) -> None:
        assert curved_court.get_wall(WallId.END1).goal_count == 1
        assert curved_court.get_wall(WallId.END2).goal_count == 1
        assert curved_court.get_wall(WallId.SIDE1).goal_count == 0

    def test_generation_is_deterministic(self) -> None:
        assert generate_court(12, 20, 4, 2) == generate_court(12, 20, 4, 2)

    def test_end_walls_match(self, arch_court: Court) -> None:
        assert arch_court.get_wall(WallId.END1).sections == arch_court.get_wall(WallId.END2).sections

    @pytest.mark.parametrize(
        "args",
        [
            (4, 15, 3, 3),
            (3, 15, 3, 3),
            (10, 4, 3, 3),
            (10, 15, 0, 3),
            (10, 15, 3, 5),
        ],
    )
    def test_invalid_dimensions_raise(self, args: tuple[int, int, int, int]) -> None:
        with pytest.raises(CourtValidationError) as exc_info:
            generate_court(*args)
        assert exc_info.value.errors

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            generate_court(4, 15, 3, 3)

    def test_validate_dimensions_collects_all_errors(self) -> None:
        errors = validate_dimensions(4, 2, 0, 9)
        assert len(errors) == 4
        assert "at least 6m" in errors[0]

    def test_standalone_end_wall(self, end_wall: Court) -> None:
        assert end_wall.is_standalone_end_wall
        assert end_wall.width == 3
        assert end_wall.length == 0
        assert end_wall.corner_type is None
        assert end_wall.wall_ids == [WallId.END1]
        assert end_wall.get_wall(WallId.END1).sections == (Goal(),)
