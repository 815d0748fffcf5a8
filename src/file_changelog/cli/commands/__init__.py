"""CLI commands for file-changelog."""

from . import changes, inspect

__all__ = ["changes", "inspect"]
