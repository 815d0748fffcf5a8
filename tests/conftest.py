"""Common test fixtures."""

import sys
from pathlib import Path

import pytest
from loguru import logger

from file_changelog.config import BaseLocation
from file_changelog.services import FileChangelog, PathInspector


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default loguru sink after tests that reconfigure logging."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def base(tmp_path: Path) -> BaseLocation:
    return BaseLocation(dir=tmp_path, url="https://files.example.com/uploads/")


@pytest.fixture
def inspector() -> PathInspector:
    return PathInspector()


@pytest.fixture
def changelog(base: BaseLocation) -> FileChangelog:
    return FileChangelog("photo", base, [])


@pytest.fixture
def make_file():
    """Create a test file with given content."""

    def _make(path: Path, content: str = "test content") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _make
