"""CLI interface for shapecheck using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shapecheck import __description__, __version__
from shapecheck.config import CheckConfig, LogLevel, load_config
from shapecheck.conformance import conforms_to_type
from shapecheck.exceptions import SchemaDeclarationError, SchemaReferenceError
from shapecheck.loader import load_records, resolve_schema

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="shapecheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"shapecheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """shapecheck - Structural runtime type validation for untyped data."""


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else _LOG_LEVELS[LogLevel(level)],
        format="%(levelname)s %(name)s: %(message)s",
    )


def _output_table(results: list[tuple[int, object]]) -> None:
    table = Table()
    table.add_column("Record", style="cyan", justify="right")
    table.add_column("Status", style="white")
    table.add_column("Path", style="dim")
    table.add_column("Message", style="white")

    for index, mismatch in results:
        if mismatch is None:
            table.add_row(str(index), "[green]OK[/green]", "", "")
        else:
            table.add_row(str(index), "[red]FAIL[/red]", escape(mismatch.path), escape(mismatch.message))

    console.print(table)


@app.command()
def check(
    data: Annotated[
        Path,
        typer.Argument(help="JSON document to check (or JSON Lines with --lines)")
    ],
    schema: Annotated[
        str,
        typer.Option("--schema", "-s", help="Schema reference: 'package.module:NAME' or 'file.py:NAME'")
    ],
    lines: Annotated[
        bool,
        typer.Option("--lines", "-l", help="Read one JSON value per line")
    ] = False,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .shapecheck.json)")
    ] = None,
    closed_objects: Annotated[
        bool,
        typer.Option("--closed-objects", help="Reject object fields not declared in the schema")
    ] = False,
    strict_float: Annotated[
        bool,
        typer.Option("--strict-float", help="Reject integer values where a float is declared")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Check JSON data against a declared schema."""
    valid_formats = ["table", "json"]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{escape(format)}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        settings = load_config(config)
        _configure_logging(settings.logging.level, verbose)

        check_config = settings.check
        if closed_objects or strict_float:
            check_config = CheckConfig(
                closed_objects=check_config.closed_objects or closed_objects,
                strict_float=check_config.strict_float or strict_float,
            )

        declaration = resolve_schema(schema)
        records = load_records(data, lines=lines)
    except (FileNotFoundError, ValueError, SchemaReferenceError, SchemaDeclarationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.info(f"Checking {len(records)} record(s) from {data} against {schema}")

    try:
        results = [
            (index, conforms_to_type(record, declaration, check_config))
            for index, record in enumerate(records)
        ]
    except SchemaDeclarationError as e:
        console.print(f"[red]Error:[/red] Invalid schema: {escape(str(e))}")
        raise typer.Exit(1)

    failures = sum(1 for _, mismatch in results if mismatch is not None)

    if format == "json":
        typer.echo(jsonlib.dumps({
            "schema": schema,
            "total": len(results),
            "failures": failures,
            "results": [
                {
                    "record": index,
                    "conforms": mismatch is None,
                    "mismatch": mismatch.to_dict() if mismatch is not None else None,
                }
                for index, mismatch in results
            ]
        }, indent=2))
    else:
        _output_table(results)
        status_color = "green" if failures == 0 else "red"
        console.print(
            f"[{status_color}]{len(results) - failures} of {len(results)} record(s) conform[/{status_color}]"
        )

    raise typer.Exit(0 if failures == 0 else 1)
