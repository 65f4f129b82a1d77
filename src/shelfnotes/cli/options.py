# ABOUTME: Shared Click options and arguments for shelfnotes CLI commands.
# ABOUTME: Provides reusable decorators for the export path and --date-format.

from pathlib import Path

import click

from shelfnotes.metadata.dates import DEFAULT_DATE_FORMAT

export_argument = click.argument(
    "export_path",
    metavar="EXPORT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)

date_format_option = click.option(
    "--date-format",
    default=DEFAULT_DATE_FORMAT,
    show_default=True,
    help="strptime pattern of the Date Read / Date Added columns.",
)
