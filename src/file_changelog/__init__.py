"""file-changelog - classify and apply changes to a set of files."""

__version__ = "0.1.0"
