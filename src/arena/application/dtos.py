"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from arena.domain import BillOfMaterials, Court, WallId, WallSide
from arena.domain.services import validate_dimensions
from arena.domain.value_objects import MAX_LENGTH, MAX_WIDTH

# Above these sizes a court is still built, with a warning.
LARGE_WIDTH = 30
LARGE_LENGTH = 50

# Fields each edit operation needs, besides "op".
EDIT_OPERATIONS: dict[str, tuple[str, ...]] = {
    "set_section_height": ("wall", "index", "height"),
    "set_wall_height": ("wall", "height"),
    "toggle_gate": ("wall", "index"),
    "toggle_chicane": ("wall", "index"),
    "toggle_mini_goal": ("wall", "index"),
    "append_section": ("side", "width", "height"),
    "append_curved_corner": ("side", "height"),
}

APPEND_OPERATIONS = frozenset({"append_section", "append_curved_corner"})


@dataclass
class CourtInput:
    """Input DTO for court dimensions."""

    width: int = 10
    length: int = 15
    end_wall_height: int = 3
    side_wall_height: int = 3

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors = validate_dimensions(
            self.width, self.length, self.end_wall_height, self.side_wall_height
        )
        if self.width > MAX_WIDTH:
            errors.append(f"Width exceeds maximum ({MAX_WIDTH}m)")
        if self.length > MAX_LENGTH:
            errors.append(f"Length exceeds maximum ({MAX_LENGTH}m)")
        return errors

    def warnings(self) -> list[str]:
        """Return non-blocking advisories about the requested size."""
        if self.width > LARGE_WIDTH or self.length > LARGE_LENGTH:
            return [
                f"Very large court ({self.width}m x {self.length}m): "
                "check the site and the part quantities carefully"
            ]
        return []


@dataclass
class EditRequest:
    """Input DTO for one edit of a court.

    Only the fields used by ``op`` need to be set, see ``EDIT_OPERATIONS``.
    """

    op: str
    wall: str | None = None
    index: int | None = None
    height: int | None = None
    side: str | None = None
    width: int | None = None

    @property
    def is_append(self) -> bool:
        return self.op in APPEND_OPERATIONS

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        if self.op not in EDIT_OPERATIONS:
            return [f"Unknown edit operation '{self.op}'"]
        errors: list[str] = []
        for name in EDIT_OPERATIONS[self.op]:
            if getattr(self, name) is None:
                errors.append(f"{self.op} requires '{name}'")
        valid_walls = [w.value for w in WallId]
        if self.wall is not None and self.wall not in valid_walls:
            errors.append(f"Wall must be one of: {', '.join(valid_walls)}")
        valid_sides = [s.value for s in WallSide]
        if self.side is not None and self.side not in valid_sides:
            errors.append(f"Side must be one of: {', '.join(valid_sides)}")
        return errors

    def describe(self) -> str:
        """Short label such as "toggle_gate side1[2]"."""
        if self.is_append:
            return f"{self.op} {self.side}"
        if self.index is not None:
            return f"{self.op} {self.wall}[{self.index}]"
        return f"{self.op} {self.wall}"


@dataclass
class EditOutcome:
    """Result of applying one EditRequest."""

    request: EditRequest
    applied: bool
    reason: str | None = None


@dataclass
class CourtOutput:
    """Output DTO containing a court and its bill of materials.

    Attributes:
        court: Generated or edited court, None if generation failed.
        bom: Bill of materials for the final court.
        edits: Outcome of each requested edit, in request order.
        errors: List of error messages if generation failed.
        warnings: Non-blocking advisories.
    """

    court: Court | None
    bom: BillOfMaterials | None = None
    edits: list[EditOutcome] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the court was produced successfully."""
        return len(self.errors) == 0

    @property
    def rejected_edits(self) -> list[EditOutcome]:
        return [outcome for outcome in self.edits if not outcome.applied]
