# ABOUTME: CLI package for shelfnotes, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from shelfnotes.cli.commands import convert_cmd, preview_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="shelfnotes")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """shelfnotes - turn a Goodreads export into Obsidian book notes."""
    _configure_logging(verbose)


cli.add_command(convert_cmd.convert)
cli.add_command(preview_cmd.preview)
