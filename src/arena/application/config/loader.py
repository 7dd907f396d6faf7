"""Loading of arena configuration files.

Reads a JSON file, parses it and validates it against the configuration
schema. Every failure is reported as a ConfigError whose ``error_type``
says which stage failed.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from arena.application.config.schema import ArenaConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised when a configuration cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation
        path: Path to the configuration file, if loaded from disk
        details: Per-field problems (validation) or line/column (json_parse)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("court", "width"))
        'court.width'
        >>> _format_json_path(("edits", 0, "toggle_gate", "index"))
        'edits[0].toggle_gate.index'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> ArenaConfiguration:
    try:
        return ArenaConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> ArenaConfiguration:
    """Load and validate an arena configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ArenaConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("court.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Loaded config file {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ArenaConfiguration:
    """Load and validate an arena configuration from a dictionary.

    Used for configurations that do not come from a file, such as API
    request bodies.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
