# ABOUTME: The `shelfnotes convert` command that writes one note per exported book.
# ABOUTME: Reads the export, downloads covers, and prints a line per book plus a summary.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfnotes.cli.options import date_format_option, export_argument
from shelfnotes.core.converter import RowResult, convert_rows
from shelfnotes.core.vault import DEFAULT_FOLDER, VaultLayout
from shelfnotes.core.writer import NoteWriter
from shelfnotes.formats.goodreads import ExportReadError, read_export
from shelfnotes.metadata.covers import OpenLibraryCovers
from shelfnotes.metadata.http import ShelfnotesHttpClient

console = Console()


def _report(row: RowResult) -> None:
    label = escape(row.label)
    if row.success:
        console.print(f"  [green]Written:[/green] {label}")
    else:
        console.print(f"  [red]Failed:[/red] {label}: {escape(row.error or 'unknown error')}")


@click.command()
@export_argument
@click.argument(
    "vault",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--folder",
    default=DEFAULT_FOLDER,
    show_default=True,
    help="Folder inside the vault that receives the notes.",
)
@click.option(
    "--resources-folder",
    default=None,
    help="Folder inside the vault for cover images (default: <folder>/resources).",
)
@date_format_option
@click.option(
    "--covers/--no-covers",
    "fetch_covers",
    default=True,
    help="Download missing covers from Open Library.",
)
def convert(
    export_path: Path,
    vault: Path,
    folder: str,
    resources_folder: str | None,
    date_format: str,
    fetch_covers: bool,
) -> None:
    """Write an Obsidian note for every book in a Goodreads EXPORT into VAULT."""
    layout = VaultLayout(vault=vault, folder=folder, resources_folder=resources_folder)
    layout.ensure()

    http_client = ShelfnotesHttpClient() if fetch_covers else None
    covers = OpenLibraryCovers(http_client) if http_client is not None else None
    writer = NoteWriter(layout, covers=covers)

    try:
        result = convert_rows(
            read_export(export_path),
            writer,
            date_format=date_format,
            on_result=_report,
        )
    except ExportReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc
    finally:
        if http_client is not None:
            http_client.close()

    parts = [f"[green]{result.written} written[/green]"]
    if result.failed:
        parts.append(f"[red]{result.failed} failed[/red]")
    console.print("\n" + ", ".join(parts))

    if result.failed:
        raise SystemExit(1)
