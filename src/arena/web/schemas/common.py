"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from arena.domain.value_objects import (
    MAX_HEIGHT,
    MAX_LENGTH,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_LENGTH,
    MIN_ODD_WIDTH,
)


class CourtDimensionsSchema(BaseModel):
    """Court dimensions in meters.

    Parity-dependent minimum widths are checked during generation.
    """

    width: int = Field(..., ge=MIN_ODD_WIDTH, le=MAX_WIDTH, description="Width in meters")
    length: int = Field(..., ge=MIN_LENGTH, le=MAX_LENGTH, description="Length in meters")
    end_wall_height: int = Field(
        default=3, ge=MIN_HEIGHT, le=MAX_HEIGHT, description="End wall height in meters"
    )
    side_wall_height: int = Field(
        default=3, ge=MIN_HEIGHT, le=MAX_HEIGHT, description="Side wall height in meters"
    )


class BomLineSchema(BaseModel):
    """One component line of a bill of materials."""

    name: str
    quantity: int = Field(..., ge=1)
