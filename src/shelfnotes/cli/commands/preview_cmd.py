# ABOUTME: The `shelfnotes preview` command for checking notes before writing them.
# ABOUTME: Prints the rendered note of each exported book without touching the vault.

from itertools import islice
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfnotes.cli.options import date_format_option, export_argument
from shelfnotes.formats.goodreads import ExportReadError, read_export
from shelfnotes.formats.note import render_note
from shelfnotes.metadata.normalizer import RecordParseError, normalize_row

console = Console()


@click.command()
@export_argument
@date_format_option
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Only preview the first N rows.",
)
def preview(export_path: Path, date_format: str, limit: int | None) -> None:
    """Print the note each book in EXPORT would produce."""
    try:
        for row_number, row in enumerate(islice(read_export(export_path), limit), start=1):
            try:
                book = normalize_row(row, date_format=date_format)
            except RecordParseError as exc:
                console.print(f"[red]Row {row_number}:[/red] {escape(str(exc))}\n")
                continue
            console.print(f"[bold]{escape(book.file_name)}[/bold]")
            click.echo(render_note(book))
    except ExportReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc
