"""Pydantic schemas for the REST API."""

from arena.web.schemas.common import BomLineSchema, CourtDimensionsSchema
from arena.web.schemas.requests import (
    BomRequest,
    ConfigValidateRequest,
    EditCourtRequest,
    EndWallRequest,
    GenerateRequest,
)
from arena.web.schemas.responses import (
    BomSchema,
    CourtOutputSchema,
    EditOutcomeSchema,
    ErrorResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "BomLineSchema",
    "CourtDimensionsSchema",
    # Requests
    "BomRequest",
    "ConfigValidateRequest",
    "EditCourtRequest",
    "EndWallRequest",
    "GenerateRequest",
    # Responses
    "BomSchema",
    "CourtOutputSchema",
    "EditOutcomeSchema",
    "ErrorResponseSchema",
    "ValidationResultSchema",
]
