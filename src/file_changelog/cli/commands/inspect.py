"""Inspect command for file-changelog CLI."""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from file_changelog.cli.app import app
from file_changelog.cli.render import path_info_table
from file_changelog.services import PathInspector

console = Console()


@app.command()
def inspect(
    paths: List[Path] = typer.Argument(..., help="Paths to inspect"),
):
    """Show existence, readability, size and modification time of paths."""
    inspector = PathInspector()
    console.print(path_info_table(inspector.inspect(p) for p in paths))
