"""Rich rendering of changelog records and history."""

from io import StringIO
from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_changelog.history import ChangeHistory
from file_changelog.schemas import DiffRecord, PathInfo

BUCKET_STYLES = {
    "create": "green",
    "update": "yellow",
    "delete": "red",
    "error": "bold red",
    "none": "dim",
}


def _fmt(value) -> str:
    return "?" if value is None else str(value)


def records_table(title: str, records: Iterable[DiffRecord]) -> Table:
    """Table with one row per diff record."""
    table = Table(title=title, box=box.SIMPLE_HEAD)
    table.add_column("Path", overflow="fold")
    table.add_column("Change")
    table.add_column("Exists")
    table.add_column("Match")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")
    table.add_column("Delta", justify="right")
    table.add_column("Error", style="red", overflow="fold")

    for record in records:
        kind = record.change.value
        delta = record.size.change
        table.add_row(
            record.path,
            Text(kind, style=BUCKET_STYLES[kind]),
            _fmt(record.exists),
            _fmt(record.match),
            _fmt(record.size.before),
            "" if record.size.after is None else str(record.size.after),
            "" if delta is None else f"{delta:+d}",
            record.error or "",
        )
    return table


def path_info_table(infos: Iterable[PathInfo]) -> Table:
    """Table with one row per inspected path."""
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("Path", overflow="fold")
    table.add_column("Ext")
    table.add_column("Exists")
    table.add_column("Readable")
    table.add_column("Size", justify="right")
    table.add_column("Modified", justify="right")

    for info in infos:
        table.add_row(
            info.path,
            info.ext,
            _fmt(info.exists),
            "" if not info.exists else _fmt(info.readable),
            "" if not info.exists else _fmt(info.size),
            "" if info.modified is None else f"{info.modified:.0f}",
        )
    return table


def render_grid(history: ChangeHistory, columns: int = 3, width: int = 120) -> str:
    """
    Render the history as a grid of cells, one per recorded path.

    Cells are filled left to right in recording order and labelled with
    their bucket.

    Args:
        history: History to render
        columns: Number of cells per row
        width: Width of the rendered text

    Returns:
        Plain text grid, or "No changes" for an empty history
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")

    if not history.total:
        return "No changes\n"

    table = Table(show_header=False, box=box.SQUARE)
    for _ in range(columns):
        table.add_column(overflow="fold")

    cells = [
        Text.assemble((bucket, BUCKET_STYLES[bucket]), " ", path)
        for bucket, path in history.items()
    ]
    for start in range(0, len(cells), columns):
        row = cells[start : start + columns]
        row.extend(Text("") for _ in range(columns - len(row)))
        table.add_row(*row)

    output = StringIO()
    Console(file=output, width=width, force_terminal=False).print(table)
    return output.getvalue()
