"""CLI commands for the tennis match journal.

This package provides the command-line interface for recording,
viewing and deleting matches.
"""

from tennisjournal.cli.main import cli, main

__all__ = ["cli", "main"]
