"""Validate command for checking arena configuration files."""

import re
from pathlib import Path
from typing import Annotated, Any

import typer

from arena.application.config import (
    ArenaConfiguration,
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)

_EDIT_PATH = re.compile(r"^edits\[(\d+)\](?:\.(\w+))?(?:\.(.+))?$")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate an arena configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema errors (unknown fields, heights out of range, unknown edit ops)
    - Court dimensions that cannot be built
    - Edits that target walls missing in the chosen mode

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        arena validate my-court.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(_summarize(config))
    typer.echo()
    result = validate_config(config)
    _display_validation_result(result, config)
    raise typer.Exit(code=result.exit_code)


def describe_path(path: str, edit_ops: list[str] | None = None) -> str:
    """Turn a configuration path into court wording.

    Examples:
        "court.width" -> "court width"
        "edits[0].toggle_gate.index" -> "edit 1 (toggle_gate): index"
        "edits[2].wall" -> "edit 3 (set_wall_height): wall", given the ops
    """
    match = _EDIT_PATH.match(path)
    if match is None:
        return path.replace(".", " ").replace("_", " ")

    number = int(match.group(1))
    first, rest = match.group(2), match.group(3)
    op = None
    if edit_ops is not None and number < len(edit_ops):
        op = edit_ops[number]
    elif first is not None and rest is not None:
        # Schema errors carry the edit op as the discriminator segment.
        op, first, rest = first, rest, None

    label = f"edit {number + 1}"
    if op:
        label += f" ({op})"
    field = ".".join(part for part in (first, rest) if part)
    return f"{label}: {field}" if field else label


def _summarize(config: ArenaConfiguration) -> str:
    court = config.court
    if court.mode == "end_wall":
        shape = "Standalone end wall"
    else:
        shape = (
            f"Court {court.width}m x {court.length}m, end walls {court.end_wall_height}m, "
            f"side walls {court.side_wall_height}m"
        )
    return f"{shape}; {len(config.edits)} edit(s); output {config.output.format}"


def display_load_error(error: ConfigError) -> None:
    """Print a configuration loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo(f"  {error.path} is not valid JSON", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, column {detail.get('column', '?')}: "
                f"{detail.get('message')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            _echo_detail(detail)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _echo_detail(detail: dict[str, Any]) -> None:
    path = detail.get("path", "")
    message = detail.get("message")
    value = detail.get("value")
    if detail.get("error_type") == "union_tag_invalid" and isinstance(value, dict):
        message = f"unknown edit op {value.get('op')!r}"
    typer.echo(f"  {describe_path(path)}: {message}", err=True)


def _display_validation_result(result: ValidationResult, config: ArenaConfiguration) -> None:
    edit_ops = [edit.op for edit in config.edits]

    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            line = f"  {describe_path(error.path, edit_ops)}: {error.message}"
            if error.value is not None:
                line += f" (got {error.value!r})"
            typer.echo(line, err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {describe_path(warning.path, edit_ops)}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. The court can be built.")
