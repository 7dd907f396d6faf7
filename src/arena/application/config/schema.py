"""Configuration schema for arena configuration files.

A configuration file describes one court, an ordered list of edits to
apply to it, and how the result should be written out.
"""

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from arena.domain.value_objects import MAX_HEIGHT, MIN_HEIGHT, WallId, WallSide

# Supported schema versions for configuration files
# Version 1.0: Court dimensions, edits and output format
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

HeightField = Annotated[int, Field(ge=MIN_HEIGHT, le=MAX_HEIGHT)]


class CourtConfig(BaseModel):
    """Configuration for the court to generate.

    Attributes:
        mode: "full" for a four-wall court, "end_wall" for a standalone end
            wall grown from a lone goal.
        width: Court width in meters. Ignored in end_wall mode.
        length: Court length in meters. Ignored in end_wall mode.
        end_wall_height: General height of the end walls (1 to 4).
        side_wall_height: General height of the side walls (1 to 4).
    """

    model_config = ConfigDict(extra="forbid")

    mode: Literal["full", "end_wall"] = "full"
    width: int = Field(default=10, ge=1, description="Court width in meters")
    length: int = Field(default=15, ge=0, description="Court length in meters")
    end_wall_height: HeightField = 3
    side_wall_height: HeightField = 3


class SetSectionHeightEdit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_section_height"]
    wall: WallId
    index: int = Field(ge=0)
    height: HeightField


class SetWallHeightEdit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_wall_height"]
    wall: WallId
    height: HeightField


class ToggleEdit(BaseModel):
    """Convert a 2m panel to a gate, chicane or mini goal, or back."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["toggle_gate", "toggle_chicane", "toggle_mini_goal"]
    wall: WallId
    index: int = Field(ge=0)


class AppendSectionEdit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["append_section"]
    side: WallSide
    width: Literal[1, 2] = 2
    height: HeightField = 3


class AppendCurvedCornerEdit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["append_curved_corner"]
    side: WallSide
    height: HeightField = 3


EditConfig = Annotated[
    Union[
        SetSectionHeightEdit,
        SetWallHeightEdit,
        ToggleEdit,
        AppendSectionEdit,
        AppendCurvedCornerEdit,
    ],
    Field(discriminator="op"),
]


class OutputConfig(BaseModel):
    """Output format configuration.

    Attributes:
        format: Output format for the BOM, or "layout" for the court tree.
        include_layout: Whether text output also lists each wall's sections.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "csv", "json", "layout"] = "text"
    include_layout: bool = False


class ArenaConfiguration(BaseModel):
    """Root configuration model for arena configuration files.

    Attributes:
        schema_version: Configuration schema version (e.g. "1.0")
        court: Court dimensions and mode
        edits: Edits applied to the generated court, in order
        output: Output settings
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    court: CourtConfig = Field(default_factory=CourtConfig)
    edits: list[EditConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
