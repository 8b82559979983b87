"""Pattern catalog CLI - run and browse design pattern demonstrations."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pattern_catalog.catalog import default_catalog
from pattern_catalog.config import get_settings
from pattern_catalog.exceptions import NotFoundError
from pattern_catalog.runner import DemoRunner
from pattern_catalog.sinks import ConsoleSink, FileSink
from pattern_catalog.types import Category, OutputSink, Result

app = typer.Typer(
    name="pattern-catalog",
    help="Runnable catalog of design pattern demonstrations",
    no_args_is_help=True,
)

console = Console()


def _fail(error: Exception) -> None:
    """Print an error as '<Kind>: <message>' and exit 1."""
    console.print(
        f"[red]{type(error).__name__}: {escape(str(error))}[/red]", soft_wrap=True
    )
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    """Runnable catalog of design pattern demonstrations."""
    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(e)
        return

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig leaves the level alone when handlers already exist
    logging.getLogger().setLevel(logging.DEBUG if verbose else settings.log_level)


@app.command("run")
def run(
    name: str = typer.Argument(..., help="Demonstration to run (see 'list')"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Append output to this file instead of stdout"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Deadline in seconds"
    ),
) -> None:
    """Run a demonstration and print its output.

    Examples:
        pattern-catalog run observer
        pattern-catalog run singleton --output demo.txt
        pattern-catalog run strategy --timeout 5
    """
    settings = get_settings()
    if output is None:
        output = settings.output_file
    if timeout is None:
        timeout = settings.run_timeout

    sink: OutputSink = FileSink(output) if output is not None else ConsoleSink(console)
    runner = DemoRunner()
    catalog = default_catalog()

    try:
        if timeout is None:
            result: Result = runner.run(catalog, name, sink)
        else:
            result = asyncio.run(
                runner.run_with_deadline(catalog, name, sink, timeout)
            )
    except NotFoundError as e:
        _fail(e)
        return

    if result.error is not None:
        _fail(result.error)

    if output is not None:
        console.print(
            f"[dim]Wrote {len(result.produced_text)} lines to {escape(str(output))}[/dim]",
            soft_wrap=True,
        )


@app.command("list")
def list_demos(
    category: Optional[Category] = typer.Option(
        None, "--category", "-c", help="Only show this pattern family"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """List registered demonstrations."""
    infos = default_catalog().describe(category)

    if as_json:
        typer.echo(json.dumps([info.model_dump(mode="json") for info in infos], indent=2))
        return

    table = Table(title="Design Pattern Demonstrations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta", no_wrap=True)
    table.add_column("Description")
    for info in infos:
        table.add_row(info.name, info.category.value, info.description)
    console.print(table)


@app.command("show")
def show(name: str = typer.Argument(..., help="Demonstration name")) -> None:
    """Show details of a demonstration."""
    try:
        entry = default_catalog().lookup(name)
    except NotFoundError as e:
        _fail(e)
        return

    console.print(f"[bold]{escape(entry.name)}[/bold]", soft_wrap=True)
    console.print(f"Category: {entry.category.value}", soft_wrap=True)
    if entry.description:
        console.print(escape(entry.description), soft_wrap=True)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
