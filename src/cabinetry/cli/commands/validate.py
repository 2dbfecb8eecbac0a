"""Validate command for checking engine configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from cabinetry.application.config import ConfigError, EngineConfiguration, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON engine configuration file to validate"),
    ],
) -> None:
    """Validate an engine configuration file.

    Checks the file for JSON syntax errors and schema errors (unknown
    settings, negative dimensions, unsupported schema version).

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)

    Example:
        cabinetry validate-config engine.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    _display_summary(config)
    typer.echo("Validation passed. Configuration is valid.")


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_summary(config: EngineConfiguration) -> None:
    construction = config.construction
    typer.echo(f"Schema version: {config.schema_version}")
    typer.echo(
        f"Carcass: {construction.board_thickness:g}mm board, "
        f"{construction.back_panel_thickness:g}mm back, "
        f"{construction.door_gap:g}mm door gap"
    )
    typer.echo(f"Part material: {config.export.part_material}")
    typer.echo()
