"""Wins & Losses - a local journal for wins, losses and opportunities for growth."""

__version__ = "0.1.0"
