"""Utility functions for file-changelog."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure loguru sinks.

    Replaces the default handler with a stderr sink at `level` and, when
    `log_file` is given, adds a rotating file sink that keeps debug output.

    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path of a log file
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), colorize=True)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            level="DEBUG",
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=False,
        )
