"""Court editing endpoint."""

from fastapi import APIRouter

from arena.application.config import edit_to_request
from arena.infrastructure.serialization import court_from_schema
from arena.web.dependencies import EditCommandDep
from arena.web.routers._convert import court_output_to_schema
from arena.web.schemas.requests import EditCourtRequest
from arena.web.schemas.responses import CourtOutputSchema

router = APIRouter(prefix="/edit", tags=["edit"])


@router.post("", response_model=CourtOutputSchema)
async def edit_court(
    request: EditCourtRequest,
    command: EditCommandDep,
) -> CourtOutputSchema:
    """Apply edits to a court previously returned by the API.

    Rejected edits leave the court unchanged and are reported with a reason
    in the ``edits`` list; the request itself still succeeds.
    """
    court = court_from_schema(request.court)
    output = command.execute(court, [edit_to_request(e) for e in request.edits])
    return court_output_to_schema(output)
