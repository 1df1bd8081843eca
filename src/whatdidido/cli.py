# region Docstring
"""
whatdidido.cli
Command-line interface for the activity logger.
Commands:
- add TEXT: record TEXT with the current working directory.
- list [--limit N]: show the most recent entries.
- summary [--flat]: show today's directory and command usage.
- sync [--file PATH] [--limit N]: import the tail of the shell history file.
Design Notes:
- The callback builds the settings, creates the data directory, configures logging
    and wires HistoryStore -> LogService into the Typer context. Failing to create the
    data directory is the only fatal startup error.
- Store and import errors are printed once as "Error: ..." and exit with status 1.
- User content is rendered through rich Text objects / escape() so brackets in
    commands are never read as markup.
"""
# endregion
# region Imports
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from whatdidido.config import HistorySettings, get_settings
from whatdidido.errors import WhatDidIDoError
from whatdidido.logger import configure_logging, logger
from whatdidido.models import Summary
from whatdidido.services import HistoryImporter, LogService
from whatdidido.store import HistoryStore
from whatdidido.utils import format_timestamp, truncate_content

# endregion
# region App

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="whatdidido",
    help="Log shell commands and snippets, then see what you did today.",
    no_args_is_help=True,
    add_completion=False,
)


@contextmanager
def _report_errors() -> Iterator[None]:
    try:
        yield
    except WhatDidIDoError as e:
        logger.error("Command failed: %s", e)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _service(ctx: typer.Context) -> LogService:
    return ctx.obj


@app.callback()
def startup(ctx: typer.Context) -> None:
    try:
        settings = get_settings(HistorySettings)
    except ValidationError as e:
        err_console.print(
            f"[bold red]Error:[/bold red] invalid configuration: {escape(str(e))}"
        )
        raise typer.Exit(code=1)
    try:
        settings.ensure_data_dir()
    except OSError as e:
        err_console.print(
            f"[bold red]Error:[/bold red] cannot create data directory "
            f"{escape(str(settings.data_dir))}: {escape(str(e))}"
        )
        raise typer.Exit(code=1)

    configure_logging(settings)
    ctx.obj = LogService(HistoryStore(settings))


# endregion
# region Commands


@app.command(name="add", help="Record TEXT with the current working directory.")
def add(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Command or snippet to record."),
) -> None:
    if not text.strip():
        err_console.print("[bold red]Error:[/bold red] TEXT must not be empty.")
        raise typer.Exit(code=1)
    with _report_errors():
        result = _service(ctx).record(text, working_directory=os.getcwd())
    if result.recorded:
        console.print(f"Added entry #{result.total}")
    else:
        console.print("Entry already exists as most recent -- SKIPPING")


@app.command(name="list", help="Show the most recent entries.")
def list_entries(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Number of entries to show."
    ),
) -> None:
    service = _service(ctx)
    limit = limit or service.store.settings.list_limit
    with _report_errors():
        entries = service.recent(limit)

    if not entries:
        console.print("No command history")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Command", style="green", overflow="fold")
    table.add_column("Time", style="dim")
    table.add_column("Directory", style="cyan", overflow="fold")
    for entry in entries:
        table.add_row(
            Text(truncate_content(entry.content)),
            format_timestamp(entry.timestamp),
            Text(entry.working_directory),
        )
    console.print(table)


@app.command(name="summary", help="Show today's command and directory usage.")
def summary(
    ctx: typer.Context,
    flat: bool = typer.Option(
        False, "--flat", help="Print today's distinct commands one per line."
    ),
) -> None:
    with _report_errors():
        report = _service(ctx).summarize_today()

    if report is None:
        console.print("No activity logged today.")
        return

    if flat:
        for entry in report.unique_entries:
            console.print(Text(entry.content))
        return

    _print_usage_table("Directory Usage", "Directory", report.directory_counts)
    _print_usage_table("Command Usage", "Command", report.command_counts)
    _print_summary(report)


@app.command(name="sync", help="Import recent lines from the shell history file.")
def sync(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Shell history file to read."
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Number of trailing lines to consider."
    ),
) -> None:
    importer = HistoryImporter(_service(ctx))
    with _report_errors():
        result = importer.import_file(file, limit=limit)
    console.print(
        f"Imported {result.imported} of {result.considered} lines "
        f"({result.duplicates} duplicates skipped)"
    )


# endregion
# region Rendering


def _print_usage_table(title: str, label: str, counts: dict[str, int]) -> None:
    table = Table(title=title, title_style="bold", title_justify="left")
    table.add_column(label, overflow="fold")
    table.add_column("Count", justify="right")
    for key, count in counts.items():
        table.add_row(Text(key), str(count))
    console.print(table)
    console.print()


def _print_summary(report: Summary) -> None:
    console.print("[bold]Summary for Today[/bold]")
    console.print(f"[green]Total entries:[/green] {report.total_entries}")
    console.print(
        f"[yellow]Most used command:[/yellow] {escape(report.most_used_command)} "
        f"({report.most_used_count} times)"
    )


# endregion


def main() -> None:
    """Entry point for the whatdidido console script."""
    app()


if __name__ == "__main__":
    main()
