"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from arena.application.config import EditConfig
from arena.infrastructure.serialization import CourtSchema
from arena.web.schemas.common import CourtDimensionsSchema


class GenerateRequest(BaseModel):
    """Request for generating a full court."""

    dimensions: CourtDimensionsSchema = Field(..., description="Court dimensions")
    edits: list[EditConfig] = Field(
        default_factory=list, description="Edits applied after generation, in order"
    )


class EndWallRequest(BaseModel):
    """Request for growing a standalone end wall from a lone goal."""

    edits: list[EditConfig] = Field(
        default_factory=list, description="Appends and edits, in order"
    )


class EditCourtRequest(BaseModel):
    """Request for editing a previously generated court."""

    court: CourtSchema = Field(..., description="Court as returned by the API")
    edits: list[EditConfig] = Field(..., description="Edits to apply, in order")


class BomRequest(BaseModel):
    """Request for the bill of materials of a court."""

    court: CourtSchema = Field(..., description="Court as returned by the API")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Arena configuration JSON")
