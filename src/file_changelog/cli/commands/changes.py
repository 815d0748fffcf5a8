"""Diff and apply commands for file-changelog CLI."""

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from file_changelog.cli.app import app
from file_changelog.cli.render import records_table, render_grid
from file_changelog.config import ChangelogConfig
from file_changelog.schemas import Delete, DiffRecord, Intent, Write
from file_changelog.services import FileChangelog

console = Console()


def read_source(source: Path) -> str:
    """Read replacement content, exiting the CLI if it cannot be read."""
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read source {source}: {e}")
        typer.echo(f"Error reading source {source}: {e}", err=True)
        raise typer.Exit(1)


def parse_spec(spec: str) -> Tuple[Path, Path]:
    """Split a TARGET=SOURCE argument."""
    target, sep, source = spec.partition("=")
    if not sep or not target or not source:
        raise typer.BadParameter(f"expected TARGET=SOURCE, got {spec!r}")
    return Path(target), Path(source)


def build_plan(specs: List[str], deletes: List[Path]) -> List[Tuple[Path, Intent]]:
    plan: List[Tuple[Path, Intent]] = []
    for spec in specs:
        target, source = parse_spec(spec)
        plan.append((target, Write(content=read_source(source))))
    plan.extend((target, Delete()) for target in deletes)
    return plan


@app.command()
def diff(
    ctx: typer.Context,
    target: Path = typer.Argument(..., help="File that would change"),
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", help="File holding the replacement content"
    ),
    delete: bool = typer.Option(False, "--delete", "-d", help="Classify removing the target"),
):
    """Show what replacing or removing a file would do, without changing it."""
    if delete == (source is not None):
        typer.echo("Pass exactly one of --source or --delete", err=True)
        raise typer.Exit(2)

    config: ChangelogConfig = ctx.obj
    changelog = FileChangelog.from_config(config)
    intent: Intent = Delete() if delete else Write(content=read_source(source))

    record = changelog.diff(target, intent)
    console.print(records_table(f"{config.label} diff", [record]))
    if record.error:
        raise typer.Exit(1)


@app.command()
def apply(
    ctx: typer.Context,
    specs: Optional[List[str]] = typer.Argument(
        None, help="TARGET=SOURCE pairs: write SOURCE's content to TARGET"
    ),
    deletes: Optional[List[Path]] = typer.Option(
        None, "--delete", "-d", help="File to remove (repeatable)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Only show the diffs"),
    columns: int = typer.Option(3, "--columns", "-c", min=1, help="Cells per grid row"),
):
    """Apply a set of file changes one by one and show the resulting history."""
    plan = build_plan(specs or [], deletes or [])
    if not plan:
        typer.echo("Nothing to apply", err=True)
        raise typer.Exit(2)

    config: ChangelogConfig = ctx.obj
    changelog = FileChangelog.from_config(config, [target for target, _ in plan])

    records: List[DiffRecord] = []
    for target, intent in plan:
        if dry_run:
            records.append(changelog.diff(target, intent))
        else:
            records.append(changelog.commit(target, intent))

    title = f"{config.label} {'dry run' if dry_run else 'changes'}"
    console.print(records_table(title, records))
    if not dry_run:
        grid = render_grid(changelog.history, columns=columns)
        console.print(Panel(Text(grid.rstrip()), title="history", expand=False))

    failed = [r for r in records if r.error]
    if failed:
        logger.error(f"{len(failed)} of {len(records)} changes were not applied")
        raise typer.Exit(1)
