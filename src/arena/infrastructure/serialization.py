"""Conversion of courts to and from plain JSON-compatible dictionaries.

The dictionary form is what the layout exporter writes and what the REST
API accepts, so an edited court can be sent back for further edits.
Every section carries a ``type`` tag naming its variant.

Incoming courts are parsed with pydantic models and then checked against
the structural rules a generated court always satisfies: goals on end
walls only, curved corners closing the end walls, goal-adjacent sections
no higher than the goal frame, and widths that add up.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from arena.domain import (
    ArchInfo,
    Chicane,
    CornerType,
    Court,
    CurvedCorner,
    Gate,
    Goal,
    GoalSide,
    MiniGoal,
    Panel,
    Section,
    SectionError,
    Wall,
    WallId,
)
from arena.domain.services import corner_allowance
from arena.domain.value_objects import (
    CURVED_CORNER_SIZE,
    GOAL_ADJACENT_MAX_HEIGHT,
    MAX_HEIGHT,
    MAX_LENGTH,
    MAX_WIDTH,
    MIN_HEIGHT,
)


class CourtSerializationError(ValueError):
    """Raised when a serialized court is malformed or breaks a layout rule."""


HeightField = Annotated[int, Field(ge=MIN_HEIGHT, le=MAX_HEIGHT)]


class ArchSchema(BaseModel):
    """Arch geometry of a transition panel."""

    model_config = ConfigDict(extra="forbid")

    base_level: HeightField
    goal_height: HeightField
    outer_height: HeightField
    goal_side: GoalSide


class PanelSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["panel"]
    width: Literal[1, 2]
    height: HeightField
    arch: ArchSchema | None = None


class GoalSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["goal"]
    width: Literal[3] = 3
    height: Literal[3] = 3


class CurvedCornerSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["curved_corner"]
    width: float = Field(default=CURVED_CORNER_SIZE, ge=CURVED_CORNER_SIZE, le=CURVED_CORNER_SIZE)
    height: HeightField


class MiniGoalSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["mini_goal"]
    width: Literal[2] = 2
    height: Literal[1] = 1


class GateSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["gate"]
    width: Literal[2] = 2
    height: HeightField


class ChicaneSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["chicane"]
    width: Literal[2] = 2
    height: HeightField


SectionSchema = Annotated[
    Union[
        PanelSchema,
        GoalSchema,
        CurvedCornerSchema,
        MiniGoalSchema,
        GateSchema,
        ChicaneSchema,
    ],
    Field(discriminator="type"),
]


class CourtSchema(BaseModel):
    """A court in its dictionary form, as written by ``court_to_dict``.

    Attributes:
        width: Court width in meters; for a standalone end wall, the length
            of the wall.
        length: Court length in meters, 0 for a standalone end wall.
        corner_type: Corner style, null for a standalone end wall.
        walls: Sections of each wall, keyed by wall id.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=MAX_WIDTH)
    length: float = Field(default=0, ge=0, le=MAX_LENGTH)
    corner_type: CornerType | None = None
    end_wall_height: int = Field(default=0, ge=0, le=MAX_HEIGHT)
    side_wall_height: int = Field(default=0, ge=0, le=MAX_HEIGHT)
    is_standalone_end_wall: bool = False
    walls: dict[WallId, list[SectionSchema]] = Field(..., min_length=1)


_SECTION_ADAPTER: TypeAdapter[Any] = TypeAdapter(SectionSchema)


def _describe_errors(error: PydanticValidationError, where: str) -> str:
    problems = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        problems.append(f"{where}.{loc}: {err['msg']}" if loc else f"{where}: {err['msg']}")
    return "; ".join(problems)


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def section_to_dict(section: Section) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": section.kind.value,
        "width": section.width,
        "height": section.height,
    }
    if isinstance(section, Panel) and section.arch is not None:
        arch = section.arch
        data["arch"] = {
            "base_level": arch.base_level,
            "goal_height": arch.goal_height,
            "outer_height": arch.outer_height,
            "goal_side": arch.goal_side.value,
        }
    return data


def court_to_dict(court: Court) -> dict[str, Any]:
    """Serialize a court, walls in canonical order."""
    return {
        "width": court.width,
        "length": court.length,
        "corner_type": court.corner_type.value if court.corner_type else None,
        "end_wall_height": court.end_wall_height,
        "side_wall_height": court.side_wall_height,
        "is_standalone_end_wall": court.is_standalone_end_wall,
        "walls": {
            wall.wall_id.value: [section_to_dict(s) for s in wall.sections]
            for wall in court.walls
        },
    }


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def _section_from_schema(schema: Any) -> Section:
    if isinstance(schema, GoalSchema):
        return Goal()
    if isinstance(schema, MiniGoalSchema):
        return MiniGoal()
    if isinstance(schema, CurvedCornerSchema):
        return CurvedCorner(height=schema.height)
    if isinstance(schema, GateSchema):
        return Gate(height=schema.height)
    if isinstance(schema, ChicaneSchema):
        return Chicane(height=schema.height)
    arch = None
    if schema.arch is not None:
        arch = ArchInfo(
            base_level=schema.arch.base_level,
            goal_height=schema.arch.goal_height,
            outer_height=schema.arch.outer_height,
            goal_side=schema.arch.goal_side,
        )
    return Panel(width=schema.width, height=schema.height, arch=arch)


def section_from_dict(data: dict[str, Any], where: str = "section") -> Section:
    """Rebuild one section.

    Raises:
        CourtSerializationError: If the type tag is unknown or the section
            dimensions are illegal.
    """
    try:
        schema = _SECTION_ADAPTER.validate_python(data)
        return _section_from_schema(schema)
    except PydanticValidationError as e:
        raise CourtSerializationError(_describe_errors(e, where)) from e
    except SectionError as e:
        raise CourtSerializationError(f"{where}: {e}") from e


def _check_wall(wall: Wall, corner_type: CornerType | None) -> list[str]:
    problems: list[str] = []
    name = wall.wall_id.value
    sections = wall.sections
    goals = wall.goal_count

    if wall.wall_id.is_end_wall:
        if goals != 1:
            problems.append(f"{name}: an end wall needs exactly one goal (found {goals})")
    elif goals:
        problems.append(f"{name}: goals belong on end walls only")

    for index, section in enumerate(sections):
        at_end = index in (0, len(sections) - 1)
        if isinstance(section, CurvedCorner) and (
            not at_end or not wall.wall_id.is_end_wall or corner_type == CornerType.RIGHT_ANGLE
        ):
            problems.append(f"{name}[{index}]: curved corners only close the ends of an end wall")
        if isinstance(section, Panel) and section.has_arch:
            if not wall.is_adjacent_to_goal(index):
                problems.append(f"{name}[{index}]: only a panel next to the goal can be an arch")
            continue
        if (
            not isinstance(section, Goal)
            and wall.is_adjacent_to_goal(index)
            and section.height > GOAL_ADJACENT_MAX_HEIGHT
        ):
            problems.append(
                f"{name}[{index}]: height {section.height} exceeds the "
                f"{GOAL_ADJACENT_MAX_HEIGHT}m cap next to the goal"
            )

    if corner_type == CornerType.CURVED and wall.wall_id.is_end_wall:
        if not (
            sections
            and isinstance(sections[0], CurvedCorner)
            and isinstance(sections[-1], CurvedCorner)
        ):
            problems.append(f"{name}: a curved court's end walls start and end with a corner")
    return problems


def check_court(court: Court) -> None:
    """Check the structural rules of a court.

    Raises:
        CourtSerializationError: Listing every broken rule.
    """
    problems: list[str] = []
    if court.is_standalone_end_wall:
        if court.wall_ids != [WallId.END1]:
            problems.append("a standalone end wall has only the end1 wall")
        if court.corner_type is not None:
            problems.append("a standalone end wall has no corner type")
    else:
        if set(court.wall_ids) != set(WallId):
            problems.append("a full court needs all four walls")
        if court.corner_type is None:
            problems.append("a full court needs a corner type")

    for wall in court.walls:
        problems.extend(_check_wall(wall, court.corner_type))

    if court.has_wall(WallId.END1) and not math.isclose(
        court.get_wall(WallId.END1).total_width, court.width
    ):
        problems.append(
            f"width {court.width:g} does not match the end wall "
            f"({court.get_wall(WallId.END1).total_width:g}m)"
        )
    if not court.is_standalone_end_wall and court.has_wall(WallId.SIDE1):
        side = court.get_wall(WallId.SIDE1).total_width + corner_allowance(court.corner_type)
        if not math.isclose(side, court.length):
            problems.append(f"length {court.length:g} does not match the side wall ({side:g}m)")

    if problems:
        raise CourtSerializationError("; ".join(problems))


def court_from_schema(schema: CourtSchema) -> Court:
    """Build a court from its validated schema and check its layout rules.

    Raises:
        CourtSerializationError: If the court breaks a structural rule.
    """
    try:
        walls = [
            Wall(wall_id, tuple(_section_from_schema(s) for s in schema.walls[wall_id]))
            for wall_id in WallId
            if wall_id in schema.walls
        ]
    except SectionError as e:
        raise CourtSerializationError(f"court: {e}") from e

    court = Court(
        width=schema.width,
        length=schema.length,
        corner_type=schema.corner_type,
        end_wall_height=schema.end_wall_height,
        side_wall_height=schema.side_wall_height,
        walls=tuple(walls),
        is_standalone_end_wall=schema.is_standalone_end_wall,
    )
    check_court(court)
    return court


def court_from_dict(data: dict[str, Any]) -> Court:
    """Rebuild a court from its dictionary form.

    Raises:
        CourtSerializationError: If the data does not describe a valid court.
    """
    try:
        schema = CourtSchema.model_validate(data)
    except PydanticValidationError as e:
        raise CourtSerializationError(_describe_errors(e, "court")) from e
    return court_from_schema(schema)
