"""Command-line interface for the OnlyCare normalization layer."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from onlycare.normalization.batch import EntityKind

app = typer.Typer(
    name="onlycare",
    help="Normalize OnlyCare API responses into strict domain records.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


@app.command()
def normalize(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="JSON response body saved from the API.",
            exists=True,
            dir_okay=False,
        ),
    ],
    kind: Annotated[
        EntityKind,
        typer.Option(
            "--kind",
            "-k",
            help="Entity kind contained in the response.",
            case_sensitive=False,
        ),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help=(
                "Export normalized records to this CSV/JSON file, or into this "
                "directory using the configured format."
            ),
        ),
    ] = None,
    export: Annotated[
        bool,
        typer.Option(
            "--export",
            "-e",
            help="Export normalized records under the configured export root.",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on the first undecodable record instead of skipping it.",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print normalized records as JSON instead of a summary table.",
        ),
    ] = False,
) -> None:
    """Normalize the records of one kind contained in a saved API response."""
    from pandera.errors import SchemaError
    from pydantic import ValidationError

    from onlycare.config.loader import load_config
    from onlycare.export.frames import entity_to_row, export_entities
    from onlycare.normalization.batch import normalize_response
    from onlycare.normalization.timestamps import fallback_count
    from onlycare.utils.logging import configure_logging

    app_config = load_config(config)
    configure_logging(
        level=app_config.logging.level,
        json_output=app_config.logging.json_output,
    )

    try:
        with input_path.open(encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        err_console.print(f"[red]Error: {input_path} is not valid JSON: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    fallbacks_before = fallback_count()
    try:
        result = normalize_response(
            kind,
            payload,
            strict=strict or app_config.normalization.strict_records,
        )
    except ValidationError as e:
        err_console.print(f"[red]Error: undecodable {kind.value} record:[/red]\n{escape(str(e))}")
        raise typer.Exit(code=1) from e
    fallbacks = fallback_count() - fallbacks_before

    if as_json:
        rows = [entity_to_row(entity) for entity in result.entities]
        typer.echo(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        table = Table(title=f"Normalization Results ({kind.value})")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Records in response", str(result.n_input))
        table.add_row("Records normalized", str(len(result.entities)))
        table.add_row("Records skipped", str(result.n_skipped))
        table.add_row("Timestamps replaced by current time", str(fallbacks))

        console.print(table)

        for error in result.errors:
            console.print(f"[yellow]⚠ Record {error.index} skipped[/yellow]")
            console.print(f"[dim]{escape(error.message)}[/dim]")

    if output is not None or export:
        target = app_config.export.resolve_path(kind.value, output)
        try:
            path = export_entities(result.entities, kind, target)
        except SchemaError as e:
            err_console.print(
                f"[red]Error: export failed schema validation:[/red]\n{escape(str(e))}"
            )
            raise typer.Exit(code=1) from e
        except ValueError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e
        err_console.print(f"[green]Saved to: {path}[/green]")


@app.command()
def kinds() -> None:
    """List the entity kinds and where they are found in responses."""
    from onlycare.normalization.batch import KIND_SPECS
    from onlycare.schemas.registry import SchemaRegistry

    table = Table(title="Entity Kinds")
    table.add_column("Kind", style="cyan")
    table.add_column("Transfer object")
    table.add_column("Response keys")
    table.add_column("Export schema", style="green")

    for entity_kind, spec in KIND_SPECS.items():
        info = SchemaRegistry.get_info(entity_kind)
        table.add_row(
            entity_kind.value,
            spec.dto.__name__,
            ", ".join([*spec.response_keys, "data"]),
            f"{info.schema.__name__} v{info.version}",
        )

    console.print(table)


@app.command("parse-time")
def parse_time(
    value: Annotated[str, typer.Argument(help="ISO-8601 timestamp with offset.")],
) -> None:
    """Convert an ISO-8601 timestamp to epoch milliseconds."""
    from onlycare.normalization.timestamps import parse_iso8601, to_epoch_ms

    try:
        millis = to_epoch_ms(parse_iso8601(value))
    except (ValueError, OverflowError) as e:
        err_console.print(
            f"[yellow]⚠ Unparseable timestamp, records would get the current time: {escape(str(e))}[/yellow]"
        )
        raise typer.Exit(code=1) from e

    console.print(str(millis))


@app.command()
def version() -> None:
    """Show version information."""
    from onlycare import __version__

    console.print(f"onlycare version {__version__}")


if __name__ == "__main__":
    app()
