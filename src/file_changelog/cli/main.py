"""Main CLI entry point for file-changelog."""  # pragma: no cover

from file_changelog.cli.app import app  # pragma: no cover

# Register commands
from file_changelog.cli.commands import changes, inspect  # pragma: no cover

__all__ = ["app", "changes", "inspect"]  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
