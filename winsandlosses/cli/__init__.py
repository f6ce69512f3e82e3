"""CLI commands for Wins & Losses.

This package provides the command-line interface: entry logging and
browsing, analytics, and profile management.
"""

from winsandlosses.cli.main import cli, main

__all__ = ["cli", "main"]
