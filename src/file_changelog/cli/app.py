from pathlib import Path
from typing import Optional

import typer

from file_changelog.config import get_config
from file_changelog.utils import setup_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import file_changelog

        typer.echo(f"file-changelog version: {file_changelog.__version__}")
        raise typer.Exit()


app = typer.Typer(name="file-changelog", no_args_is_help=True)


@app.callback()
def app_callback(
    ctx: typer.Context,
    label: Optional[str] = typer.Option(
        None,
        "--label",
        "-l",
        help="Label included in log messages",
        envvar="FILE_CHANGELOG_LABEL",
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        help="Directory where tracked files are placed",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Minimum level for console log output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """file-changelog - preview and apply file changes safely."""
    config = get_config(label=label, base_dir=base_dir, log_level=log_level)
    setup_logging(level=config.log_level, log_file=config.log_file)
    ctx.obj = config
