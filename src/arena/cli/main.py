"""Typer CLI for arena layout generation."""

from pathlib import Path
from typing import Annotated

import typer

from arena.application import (
    CourtInput,
    CourtOutput,
    EditRequest,
    GenerateCourtCommand,
)
from arena.application.config import (
    ArenaConfiguration,
    ConfigError,
    config_to_court_input,
    config_to_edits,
    load_config,
    validate_config,
)
from arena.cli.commands import display_load_error, validate_command
from arena.infrastructure import (
    BomTableFormatter,
    WallScheduleFormatter,
)
from arena.infrastructure.exporters import ExporterRegistry
from arena.infrastructure.exporters.bom import OUTPUT_FORMATS as BOM_FORMATS


app = typer.Typer(
    name="arena",
    help="Generate fenced games-court layouts and their bills of materials.",
)

app.command(name="validate")(validate_command)


def _load(config_file: Path) -> ArenaConfiguration:
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)
    return config


def _run_config(config: ArenaConfiguration) -> CourtOutput:
    command = GenerateCourtCommand()
    edits = config_to_edits(config)
    if config.court.mode == "end_wall":
        return command.execute_end_wall(edits)
    return command.execute(config_to_court_input(config), edits)


def _parse_append(value: str) -> EditRequest:
    """Parse an --add value: "side:width:height" or "side:corner:height"."""
    parts = value.split(":")
    if len(parts) != 3:
        raise typer.BadParameter(
            f"'{value}' should look like left:2:3 or right:corner:2", param_hint="--add"
        )
    side, what, height = parts
    try:
        if what == "corner":
            return EditRequest(op="append_curved_corner", side=side, height=int(height))
        return EditRequest(op="append_section", side=side, width=int(what), height=int(height))
    except ValueError:
        raise typer.BadParameter(f"'{value}' has a non-numeric size", param_hint="--add")


def _emit(
    result: CourtOutput,
    output_format: str,
    output_file: Path | None,
    include_layout: bool,
) -> None:
    """Print or write a successful result in the requested format."""
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)
    for outcome in result.rejected_edits:
        typer.echo(f"Skipped {outcome.request.describe()}: {outcome.reason}", err=True)

    if output_format == "text":
        parts: list[str] = [result.court.description, ""]
        if include_layout:
            parts.extend([WallScheduleFormatter().format(result.court), ""])
        parts.append(BomTableFormatter().format(result.bom))
        content = "\n".join(parts)
    elif output_format in BOM_FORMATS:
        content = ExporterRegistry.get("bom")(output_format=output_format).export_string(result)
    else:
        content = ExporterRegistry.get(output_format)().export_string(result)

    if output_file is not None:
        output_file.write_text(content, encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(content)


def _output_formats() -> list[str]:
    """BOM formats plus every other registered exporter, e.g. "layout"."""
    others = [name for name in ExporterRegistry.available_formats() if name != "bom"]
    return [*BOM_FORMATS, *others]


def _check_format(output_format: str) -> None:
    if output_format in BOM_FORMATS:
        return
    if output_format == "bom" or not ExporterRegistry.is_registered(output_format):
        typer.echo(
            f"Unknown format '{output_format}'. Choose one of: {', '.join(_output_formats())}",
            err=True,
        )
        raise typer.Exit(code=1)


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Court width in meters"),
    ] = None,
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", help="Court length in meters"),
    ] = None,
    end_height: Annotated[
        int | None,
        typer.Option("--end-height", help="End wall height in meters (1-4)"),
    ] = None,
    side_height: Annotated[
        int | None,
        typer.Option("--side-height", help="Side wall height in meters (1-4)"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, csv, json, layout"),
    ] = None,
    layout: Annotated[
        bool,
        typer.Option("--layout", help="Include the wall schedule in text output"),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Generate a full court from dimensions or a configuration file.

    Command line dimensions override the values in the configuration file.
    Edits listed in the configuration file are applied after generation.
    """
    edits: list[EditRequest] = []
    include_layout = layout
    if config_file is not None:
        config = _load(config_file)
        if config.court.mode == "end_wall":
            typer.echo("Error: use 'arena endwall' or 'arena bom' for end_wall configs", err=True)
            raise typer.Exit(code=1)
        court_input = config_to_court_input(config)
        edits = config_to_edits(config)
        output_format = output_format or config.output.format
        include_layout = layout or config.output.include_layout
    else:
        court_input = CourtInput()

    if width is not None:
        court_input.width = width
    if length is not None:
        court_input.length = length
    if end_height is not None:
        court_input.end_wall_height = end_height
    if side_height is not None:
        court_input.side_wall_height = side_height

    output_format = output_format or "text"
    _check_format(output_format)
    result = GenerateCourtCommand().execute(court_input, edits)
    _emit(result, output_format, output_file, include_layout)


@app.command()
def endwall(
    add: Annotated[
        list[str] | None,
        typer.Option(
            "--add",
            "-a",
            help="Append to the wall, in order: side:width:height or side:corner:height",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv, json, layout"),
    ] = "text",
    layout: Annotated[
        bool,
        typer.Option("--layout", help="Include the wall schedule in text output"),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Build a standalone end wall outward from a lone goal.

    Example:
        arena endwall --add left:2:3 --add right:2:3 --add left:corner:3
    """
    _check_format(output_format)
    edits = [_parse_append(value) for value in add or []]
    result = GenerateCourtCommand().execute_end_wall(edits)
    _emit(result, output_format, output_file, layout)


@app.command()
def bom(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, csv, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Print the bill of materials for a configuration file."""
    config = _load(config_file)
    output_format = output_format or config.output.format
    if output_format == "layout":
        output_format = "json"
    _check_format(output_format)
    _emit(_run_config(config), output_format, output_file, include_layout=False)


if __name__ == "__main__":
    app()
