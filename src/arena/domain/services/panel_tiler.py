"""Greedy panel tiling for straight wall runs."""

from __future__ import annotations

from ..entities import Panel
from ..value_objects import PANEL_WIDTHS

__all__ = ["tile"]


def tile(span: float, height: int) -> list[Panel]:
    """Fill ``span`` meters of wall with standard panels.

    Emits as many 2m panels as fit, then a single 1m panel if at least a
    meter remains. Anything shorter than a meter is left uncovered, so the
    run is rounded down to whole meters of panel.

    Args:
        span: Length of the run in meters.
        height: Height given to every panel.

    Returns:
        Panels in order along the run.
    """
    panels: list[Panel] = []
    remaining = span
    widest, narrowest = PANEL_WIDTHS[0], PANEL_WIDTHS[-1]
    while remaining >= widest:
        panels.append(Panel(width=widest, height=height))
        remaining -= widest
    if remaining >= narrowest:
        panels.append(Panel(width=narrowest, height=height))
    return panels
