"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from arena.web.schemas.common import BomLineSchema


class EditOutcomeSchema(BaseModel):
    """Result of one requested edit."""

    op: str
    description: str
    applied: bool
    reason: str | None = None


class BomSchema(BaseModel):
    """Bill of materials with its total component count."""

    lines: list[BomLineSchema] = Field(default_factory=list)
    total_components: int = 0


class CourtOutputSchema(BaseModel):
    """Generated or edited court with its bill of materials."""

    is_valid: bool
    description: str
    court: dict[str, Any]
    bom: BomSchema
    edits: list[EditOutcomeSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Configuration validation result."""

    is_valid: bool
    exit_code: int
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
