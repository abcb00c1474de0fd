"""Main CLI entry point for the tennis match journal.

This module provides the main click group and registers
the journal commands on it.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from tennisjournal.cli.journal import add, count, delete, ratio, show, view


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _setup_logging(verbose: bool) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tennisjournal")
@click.option(
    "--file", "journal_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Journal file to use instead of the configured one.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, journal_file: Optional[Path], verbose: bool) -> None:
    """Tennis Journal - keep a record of the matches you play.

    \b
    Quick Start:
      tennisjournal add --opponent Nadal --lost --surface clay \\
          --duration 95 --date 2024-05-01 --score "3-6 4-6"
      tennisjournal view       # Every match, details and stats
      tennisjournal ratio      # Wins : losses
    """
    from tennisjournal.config import load_config, get_journal_path

    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["journal_path"] = get_journal_path(load_config(), journal_file)


for command in (add, delete, view, show, ratio, count):
    cli.add_command(command)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
