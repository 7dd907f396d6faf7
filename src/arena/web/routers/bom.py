"""Bill of materials endpoint."""

from fastapi import APIRouter

from arena.infrastructure.serialization import court_from_schema
from arena.web.dependencies import BomCalculatorDep
from arena.web.routers._convert import bom_to_schema
from arena.web.schemas.requests import BomRequest
from arena.web.schemas.responses import BomSchema

router = APIRouter(prefix="/bom", tags=["bom"])


@router.post("", response_model=BomSchema)
async def calculate_bom(request: BomRequest, calculator: BomCalculatorDep) -> BomSchema:
    """Calculate the bill of materials for a court."""
    return bom_to_schema(calculator.calculate(court_from_schema(request.court)))
