"""Court generation endpoints."""

from fastapi import APIRouter

from arena.application.config import edit_to_request
from arena.application.dtos import CourtInput
from arena.web.dependencies import GenerateCommandDep
from arena.web.routers._convert import court_output_to_schema
from arena.web.schemas.requests import EndWallRequest, GenerateRequest
from arena.web.schemas.responses import CourtOutputSchema

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=CourtOutputSchema)
async def generate_court(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> CourtOutputSchema:
    """Generate a full court, then apply any requested edits.

    Raises:
        CourtGenerationError: If the dimensions cannot be built.
    """
    dims = request.dimensions
    court_input = CourtInput(
        width=dims.width,
        length=dims.length,
        end_wall_height=dims.end_wall_height,
        side_wall_height=dims.side_wall_height,
    )
    output = command.execute(court_input, [edit_to_request(e) for e in request.edits])
    return court_output_to_schema(output)


@router.post("/end-wall", response_model=CourtOutputSchema)
async def generate_end_wall(
    request: EndWallRequest,
    command: GenerateCommandDep,
) -> CourtOutputSchema:
    """Start a standalone end wall from a lone goal and apply the edits."""
    output = command.execute_end_wall([edit_to_request(e) for e in request.edits])
    return court_output_to_schema(output)
