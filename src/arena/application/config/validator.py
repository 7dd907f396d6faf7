"""Semantic validation of arena configurations.

The schema only checks shapes and ranges. This module checks that the
configuration describes a court that can actually be built, and flags
settings that are legal but probably not what the user meant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arena.application.config.schema import ArenaConfiguration
from arena.application.dtos import (
    LARGE_LENGTH,
    LARGE_WIDTH,
    MAX_LENGTH,
    MAX_WIDTH,
)
from arena.domain.services import minimum_width
from arena.domain.value_objects import MIN_LENGTH, WallId


@dataclass
class ValidationError:
    """A blocking validation problem.

    Attributes:
        path: JSON path to the invalid field (e.g. "court.width")
        message: Human-readable description of the error
        value: The invalid value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation concern.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self


def _check_dimensions(config: ArenaConfiguration, result: ValidationResult) -> None:
    court = config.court
    min_width = minimum_width(court.width)
    if court.width < min_width:
        parity = "even" if court.width % 2 == 0 else "odd"
        result.add_error(
            "court.width",
            f"An {parity} court must be at least {min_width}m wide",
            court.width,
        )
    elif court.width > MAX_WIDTH:
        result.add_error("court.width", f"Width exceeds maximum ({MAX_WIDTH}m)", court.width)

    if court.length < MIN_LENGTH:
        result.add_error(
            "court.length", f"Length must be at least {MIN_LENGTH}m", court.length
        )
    elif court.length > MAX_LENGTH:
        result.add_error(
            "court.length", f"Length exceeds maximum ({MAX_LENGTH}m)", court.length
        )

    if court.width > LARGE_WIDTH or court.length > LARGE_LENGTH:
        result.add_warning(
            "court",
            f"Very large court ({court.width}m x {court.length}m)",
            suggestion="Check the site dimensions and the resulting part quantities",
        )


def _check_edits(config: ArenaConfiguration, result: ValidationResult) -> None:
    end_wall_mode = config.court.mode == "end_wall"
    for i, edit in enumerate(config.edits):
        path = f"edits[{i}]"
        if edit.op.startswith("append_"):
            if not end_wall_mode:
                result.add_warning(
                    path,
                    f"'{edit.op}' only applies to a standalone end wall and will be skipped",
                    suggestion='Set court.mode to "end_wall"',
                )
            continue
        if end_wall_mode and edit.wall != WallId.END1:
            result.add_error(
                f"{path}.wall",
                f"A standalone end wall only has wall '{WallId.END1.value}'",
                edit.wall.value,
            )


def validate_config(config: ArenaConfiguration) -> ValidationResult:
    """Perform full semantic validation of a configuration.

    Dimension checks are skipped in end_wall mode, where the width follows
    from the appended sections and there is no length.
    """
    result = ValidationResult()
    if config.court.mode == "full":
        _check_dimensions(config, result)
    _check_edits(config, result)
    return result
