"""Application commands (use cases) for court generation and editing."""

from __future__ import annotations

import logging
from typing import Callable

from arena.domain import (
    BomCalculator,
    Court,
    CourtValidationError,
    MutationResult,
    generate_court,
    generate_standalone_end_wall,
)
from arena.domain.services import (
    try_append_curved_corner,
    try_append_section,
    try_set_section_height,
    try_set_wall_height,
    try_toggle_chicane,
    try_toggle_gate,
    try_toggle_mini_goal,
)

from .dtos import CourtInput, CourtOutput, EditOutcome, EditRequest

logger = logging.getLogger(__name__)

EditHandler = Callable[[Court, EditRequest], MutationResult]

_HANDLERS: dict[str, EditHandler] = {
    "set_section_height": lambda court, req: try_set_section_height(
        court, req.wall, req.index, req.height
    ),
    "set_wall_height": lambda court, req: try_set_wall_height(court, req.wall, req.height),
    "toggle_gate": lambda court, req: try_toggle_gate(court, req.wall, req.index),
    "toggle_chicane": lambda court, req: try_toggle_chicane(court, req.wall, req.index),
    "toggle_mini_goal": lambda court, req: try_toggle_mini_goal(court, req.wall, req.index),
    "append_section": lambda court, req: try_append_section(
        court, req.side, req.width, req.height
    ),
    "append_curved_corner": lambda court, req: try_append_curved_corner(
        court, req.side, req.height
    ),
}


class EditCourtCommand:
    """Command to apply an ordered list of edits to a court.

    Edits are applied one after another; a rejected edit leaves the court as
    it was and processing continues with the next one.
    """

    def __init__(self, bom_calculator: BomCalculator | None = None) -> None:
        self.bom_calculator = bom_calculator or BomCalculator()

    def apply(self, court: Court, edit: EditRequest) -> tuple[Court, EditOutcome]:
        """Apply a single edit.

        Returns:
            The resulting court and the outcome of the edit.
        """
        errors = edit.validate()
        if errors:
            return court, EditOutcome(request=edit, applied=False, reason="; ".join(errors))
        result = _HANDLERS[edit.op](court, edit)
        return result.court, EditOutcome(
            request=edit, applied=result.applied, reason=result.reason
        )

    def execute(self, court: Court, edits: list[EditRequest]) -> CourtOutput:
        """Apply ``edits`` in order and compute the BOM of the final court."""
        outcomes: list[EditOutcome] = []
        for edit in edits:
            court, outcome = self.apply(court, edit)
            if not outcome.applied:
                logger.info(f"Skipped {edit.describe()}: {outcome.reason}")
            outcomes.append(outcome)
        return CourtOutput(
            court=court,
            bom=self.bom_calculator.calculate(court),
            edits=outcomes,
        )


class GenerateCourtCommand:
    """Command to generate a court, optionally followed by edits.

    Supports both full four-wall courts and standalone end walls. For a
    standalone end wall, use execute_end_wall().
    """

    def __init__(
        self,
        bom_calculator: BomCalculator | None = None,
        edit_command: EditCourtCommand | None = None,
    ) -> None:
        self.bom_calculator = bom_calculator or BomCalculator()
        self.edit_command = edit_command or EditCourtCommand(self.bom_calculator)

    def execute(
        self,
        court_input: CourtInput,
        edits: list[EditRequest] | None = None,
    ) -> CourtOutput:
        """Execute the court generation command.

        Args:
            court_input: Court dimensions and wall heights.
            edits: Optional edits applied to the generated court in order.

        Returns:
            CourtOutput with the court and its BOM, or with errors.
        """
        errors = court_input.validate()
        if errors:
            return CourtOutput(court=None, errors=errors)

        try:
            court = generate_court(
                court_input.width,
                court_input.length,
                court_input.end_wall_height,
                court_input.side_wall_height,
            )
        except CourtValidationError as e:
            return CourtOutput(court=None, errors=list(e.errors))

        output = self.edit_command.execute(court, edits or [])
        output.warnings.extend(court_input.warnings())
        return output

    def execute_end_wall(self, edits: list[EditRequest] | None = None) -> CourtOutput:
        """Start a standalone end wall from a lone goal and apply ``edits``."""
        return self.edit_command.execute(generate_standalone_end_wall(), edits or [])
