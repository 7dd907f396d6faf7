"""Shared court fixtures for arena tests."""

from __future__ import annotations

import pytest

from arena.domain import Court, generate_court, generate_standalone_end_wall


# =============================================================================
# Shared court fixtures
# =============================================================================


@pytest.fixture
def curved_court() -> Court:
    """10m x 15m court with 3m walls and curved corners.

    End walls are [CC3, P2, P1, Goal, P2, P1, CC3]; side walls are seven
    2m panels.
    """
    return generate_court(10, 15, 3, 3)


@pytest.fixture
def arch_court() -> Court:
    """10m x 15m court with 2m walls, so end walls carry one arch panel each."""
    return generate_court(10, 15, 2, 2)


@pytest.fixture
def right_angle_court() -> Court:
    """7m x 5m court with 90 degree corners."""
    return generate_court(7, 5, 3, 3)


@pytest.fixture
def end_wall() -> Court:
    """Standalone end wall holding only the goal."""
    return generate_standalone_end_wall()
