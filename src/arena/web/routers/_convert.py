"""Conversion of application outputs to response schemas."""

from arena.application.dtos import CourtOutput
from arena.domain import BillOfMaterials
from arena.infrastructure.serialization import court_to_dict
from arena.web.exceptions import CourtGenerationError
from arena.web.schemas.common import BomLineSchema
from arena.web.schemas.responses import BomSchema, CourtOutputSchema, EditOutcomeSchema


def bom_to_schema(bom: BillOfMaterials) -> BomSchema:
    return BomSchema(
        lines=[BomLineSchema(name=line.name, quantity=line.quantity) for line in bom.lines],
        total_components=bom.total_components,
    )


def court_output_to_schema(output: CourtOutput) -> CourtOutputSchema:
    """Convert CourtOutput to response schema.

    Raises:
        CourtGenerationError: If the output carries errors.
    """
    if not output.is_valid or output.court is None:
        raise CourtGenerationError(output.errors)
    return CourtOutputSchema(
        is_valid=True,
        description=output.court.description,
        court=court_to_dict(output.court),
        bom=bom_to_schema(output.bom),
        edits=[
            EditOutcomeSchema(
                op=outcome.request.op,
                description=outcome.request.describe(),
                applied=outcome.applied,
                reason=outcome.reason,
            )
            for outcome in output.edits
        ],
        warnings=output.warnings,
    )
