"""Typer CLI for catalog import, job export and part derivation."""

from pathlib import Path
from typing import Annotated

import typer

from cabinetry.application import InterchangeError
from cabinetry.application.config import ConfigError, EngineConfiguration, load_config
from cabinetry.application.factory import ServiceFactory
from cabinetry.cli.commands import validate_command
from cabinetry.domain import ProductCategory, classify_for_catalog, classify_for_export
from cabinetry.infrastructure import (
    ClassificationFormatter,
    JsonFileStore,
    PartListFormatter,
)

app = typer.Typer(
    name="cabinetry",
    help="Import cabinet catalogs and export jobs for the CNC assembly workflow.",
)

# Register validate-config command
app.command(name="validate-config")(validate_command)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON engine configuration file"),
]
StoreOption = Annotated[
    Path,
    typer.Option("--store", "-s", help="Path to the JSON store file"),
]


def _load_configuration(config_file: Path | None) -> EngineConfiguration:
    """Load the engine configuration, or the defaults when no file is given."""
    if config_file is None:
        return EngineConfiguration()
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e.message}", err=True)
        raise typer.Exit(code=1)


def _open_store(store_file: Path) -> JsonFileStore:
    try:
        return JsonFileStore(store_file)
    except InterchangeError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


@app.command(name="import-catalog")
def import_catalog(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Spreadsheet 2003 XML catalog export"),
    ],
    store_file: StoreOption,
    config_file: ConfigOption = None,
) -> None:
    """Import a product catalog into the store."""
    config = _load_configuration(config_file)
    try:
        content = catalog_file.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error reading {catalog_file}: {e}", err=True)
        raise typer.Exit(code=1)

    store = _open_store(store_file)
    command = ServiceFactory(config=config, store=store).create_import_catalog_command()
    try:
        result = command.execute(content)
        store.save()
    except InterchangeError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result.message)
    for category, count in result.category_counts.items():
        typer.echo(f"  {category}: {count}")
    if result.dropped:
        typer.echo(f"Skipped {result.dropped} rows without a name or link id")


@app.command(name="export-job")
def export_job(
    job_id: Annotated[str, typer.Argument(help="Identifier of the job to export")],
    store_file: StoreOption,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the .xml file (prints to stdout if omitted)",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Export a job as an assembly XML document."""
    config = _load_configuration(config_file)
    store = _open_store(store_file)
    command = ServiceFactory(config=config, store=store).create_export_job_command()
    try:
        result = command.execute(job_id)
    except InterchangeError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if output_dir is None:
        typer.echo(result.xml)
        return

    output_path = output_dir / f"{result.filename}.xml"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.xml, encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error writing {output_path}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Exported: {output_path}")


@app.command()
def parts(
    width: Annotated[float, typer.Option("--width", "-w", help="Cabinet width in mm")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Cabinet depth in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Cabinet height in mm")],
    definition_id: Annotated[
        str,
        typer.Option("--definition-id", help="Cabinet definition id, e.g. base-2d-600"),
    ] = "",
    category: Annotated[
        ProductCategory | None,
        typer.Option(
            "--category",
            help="Category override (default: from the definition id)",
            case_sensitive=False,
        ),
    ] = None,
    material: Annotated[
        str | None,
        typer.Option("--material", "-m", help="Finish material for carcass parts"),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Display the cut parts derived for one cabinet."""
    if min(width, depth, height) < 0:
        typer.echo("Error: Dimensions must not be negative", err=True)
        raise typer.Exit(code=1)

    config = _load_configuration(config_file)
    deriver = ServiceFactory(config=config).get_part_deriver()
    derived = deriver.derive(
        width,
        depth,
        height,
        category or classify_for_export(definition_id),
        finish_material=material or config.export.part_material,
        definition_id=definition_id,
    )
    typer.echo(PartListFormatter().format(derived))


@app.command()
def classify(
    name: Annotated[str, typer.Argument(help="Catalog product name")],
) -> None:
    """Show how a catalog product name is classified."""
    typer.echo(ClassificationFormatter().format(name, classify_for_catalog(name)))


if __name__ == "__main__":
    app()
