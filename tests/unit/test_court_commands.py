"""Unit tests for the application commands."""

import logging

import pytest

from arena.application import (
    CourtInput,
    EditCourtCommand,
    EditRequest,
    GenerateCourtCommand,
)
from arena.domain import Chicane, Court, Gate, WallId


class TestCourtInput:
    """Tests for CourtInput validation."""

    def test_defaults_are_valid(self) -> None:
        assert CourtInput().validate() == []
        assert CourtInput().warnings() == []

    def test_too_narrow(self) -> None:
        errors = CourtInput(width=4).validate()
        assert len(errors) == 1
        assert "at least 6m" in errors[0]

    def test_too_long(self) -> None:
        assert CourtInput(length=81).validate() == ["Length exceeds maximum (80m)"]

    def test_large_court_warning(self) -> None:
        assert CourtInput(width=10, length=51).warnings()


class TestEditRequest:
    """Tests for EditRequest validation."""

    def test_unknown_op(self) -> None:
        assert EditRequest(op="paint").validate() == ["Unknown edit operation 'paint'"]

    def test_missing_fields(self) -> None:
        errors = EditRequest(op="toggle_gate", wall="side1").validate()
        assert errors == ["toggle_gate requires 'index'"]

    def test_unknown_wall_and_side(self) -> None:
        errors = EditRequest(op="set_section_height", wall="roof", index=0, height=2).validate()
        assert errors[0].startswith("Wall must be one of")
        errors = EditRequest(op="append_curved_corner", side="up", height=2).validate()
        assert errors[0].startswith("Side must be one of")

    @pytest.mark.parametrize(
        ("request_", "label"),
        [
            (EditRequest(op="toggle_gate", wall="side1", index=2), "toggle_gate side1[2]"),
            (EditRequest(op="set_wall_height", wall="end2", height=4), "set_wall_height end2"),
            (EditRequest(op="append_section", side="left", width=2, height=3), "append_section left"),
        ],
    )
    def test_describe(self, request_: EditRequest, label: str) -> None:
        assert request_.describe() == label


class TestEditCourtCommand:
    """Tests for applying edit sequences."""

    def test_edits_apply_in_order(self, curved_court: Court) -> None:
        output = EditCourtCommand().execute(
            curved_court,
            [
                EditRequest(op="toggle_gate", wall="side1", index=2),
                EditRequest(op="toggle_gate", wall="side1", index=2),
                EditRequest(op="toggle_chicane", wall="side1", index=2),
            ],
        )
        assert all(outcome.applied for outcome in output.edits)
        assert isinstance(output.court.get_wall(WallId.SIDE1).sections[2], Chicane)

    def test_rejected_edit_does_not_stop_the_rest(
        self, curved_court: Court, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="arena.application.commands"):
            output = EditCourtCommand().execute(
                curved_court,
                [
                    EditRequest(op="toggle_gate", wall="end1", index=3),
                    EditRequest(op="toggle_gate", wall="side2", index=0),
                ],
            )
        assert [outcome.applied for outcome in output.edits] == [False, True]
        assert output.rejected_edits[0].reason == "cannot convert a goal"
        assert isinstance(output.court.get_wall(WallId.SIDE2).sections[0], Gate)
        assert "Skipped toggle_gate end1[3]" in caplog.text

    def test_invalid_request_is_rejected(self, curved_court: Court) -> None:
        command = EditCourtCommand()
        court, outcome = command.apply(curved_court, EditRequest(op="toggle_gate"))
        assert court is curved_court
        assert not outcome.applied
        assert "requires 'wall'" in outcome.reason

    def test_bom_reflects_final_court(self, curved_court: Court) -> None:
        output = EditCourtCommand().execute(
            curved_court, [EditRequest(op="toggle_mini_goal", wall="side1", index=0)]
        )
        assert output.bom.quantity_of("Mini Goal 2m") == 1


class TestGenerateCourtCommand:
    """Tests for court generation."""

    def test_generate(self) -> None:
        output = GenerateCourtCommand().execute(CourtInput())
        assert output.is_valid
        assert output.bom.total_components == 106
        assert output.warnings == []

    def test_invalid_dimensions(self) -> None:
        output = GenerateCourtCommand().execute(CourtInput(width=4))
        assert not output.is_valid
        assert output.court is None
        assert output.bom is None

    def test_generate_with_edits(self) -> None:
        output = GenerateCourtCommand().execute(
            CourtInput(), [EditRequest(op="set_wall_height", wall="side1", height=4)]
        )
        side1 = output.court.get_wall(WallId.SIDE1)
        assert {section.height for section in side1} == {4}

    def test_large_court_warns(self) -> None:
        output = GenerateCourtCommand().execute(CourtInput(width=40, length=60))
        assert output.is_valid
        assert len(output.warnings) == 1

    def test_append_on_full_court_is_skipped(self) -> None:
        output = GenerateCourtCommand().execute(
            CourtInput(), [EditRequest(op="append_section", side="left", width=2, height=3)]
        )
        assert output.is_valid
        assert output.rejected_edits[0].reason == (
            "sections can only be added to a standalone end wall"
        )

    def test_end_wall(self) -> None:
        output = GenerateCourtCommand().execute_end_wall(
            [
                EditRequest(op="append_section", side="left", width=2, height=3),
                EditRequest(op="append_section", side="right", width=2, height=3),
                EditRequest(op="append_curved_corner", side="left", height=3),
                EditRequest(op="append_curved_corner", side="right", height=3),
            ]
        )
        assert output.court.width == 8
        assert output.court.description == "End wall, 8m wide"
        assert output.bom.total_components == 16
