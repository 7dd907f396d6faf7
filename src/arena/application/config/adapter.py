"""Adapter from ArenaConfiguration to application DTOs."""

from arena.application.config.schema import ArenaConfiguration, EditConfig
from arena.application.dtos import CourtInput, EditRequest


def config_to_court_input(config: ArenaConfiguration) -> CourtInput:
    court = config.court
    return CourtInput(
        width=court.width,
        length=court.length,
        end_wall_height=court.end_wall_height,
        side_wall_height=court.side_wall_height,
    )


def edit_to_request(edit: EditConfig) -> EditRequest:
    """Flatten one schema edit into an EditRequest.

    Enum values are unwrapped to plain strings so that the request looks the
    same whether it came from a file, the CLI or the REST API.
    """
    data = edit.model_dump(mode="json")
    return EditRequest(
        op=data["op"],
        wall=data.get("wall"),
        index=data.get("index"),
        height=data.get("height"),
        side=data.get("side"),
        width=data.get("width"),
    )


def config_to_edits(config: ArenaConfiguration) -> list[EditRequest]:
    return [edit_to_request(edit) for edit in config.edits]
