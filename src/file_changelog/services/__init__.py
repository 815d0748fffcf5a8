"""Services package."""

from .inspector import PathInspector
from .changelog import FileChangelog

__all__ = [
    "PathInspector",
    "FileChangelog",
]
