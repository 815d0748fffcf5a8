"""Utilities for file operations."""
import hashlib
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from loguru import logger


class FileError(Exception):
    """Base exception for file operations."""
    pass


class FileWriteError(FileError):
    """Raised when writing a file fails."""
    pass


class FileDeleteError(FileError):
    """Raised when removing a file fails."""
    pass


def compute_checksum(content: Union[str, bytes]) -> str:
    """
    Compute SHA-256 checksum of content.

    Text is encoded as UTF-8 first, so a string and its encoded bytes
    produce the same checksum.

    Args:
        content: Text or raw bytes to hash

    Returns:
        SHA-256 hex digest

    Raises:
        FileError: If checksum computation fails
    """
    try:
        data = content.encode("utf-8") if isinstance(content, str) else content
        return hashlib.sha256(data).hexdigest()
    except Exception as e:
        logger.error(f"Failed to compute checksum: {e}")
        raise FileError(f"Failed to compute checksum: {e}")


def ensure_directory(path: Path) -> None:
    """
    Ensure directory exists, creating if necessary.

    Args:
        path: Directory path to ensure

    Raises:
        FileWriteError: If directory creation fails
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except Exception as e:
        logger.error(f"Failed to create directory: {path}: {e}")
        raise FileWriteError(f"Failed to create directory {path}: {e}")


def write_file_atomic(path: Path, content: str) -> int:
    """
    Overwrite a file with content using a temporary file.

    The whole file is replaced; the content is written as UTF-8 bytes so the
    result is byte-identical to the candidate. A symlink is written through
    to its target, and an existing file keeps its permission bits. The
    temporary file gets a unique name next to the target so no sibling file
    is ever clobbered.

    Args:
        path: Target file path
        content: Content to write

    Returns:
        Number of bytes written

    Raises:
        FileWriteError: If write operation fails
    """
    temp_path = None
    try:
        data = content.encode("utf-8")
        target = path.resolve() if path.is_symlink() else path
        try:
            mode = stat.S_IMODE(target.stat().st_mode)
        except FileNotFoundError:
            # new files get the default mode, mkstemp would leave them 0o600
            umask = os.umask(0)
            os.umask(umask)
            mode = 0o666 & ~umask

        fd, temp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        temp_path = Path(temp_name)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(temp_path, mode)
        temp_path.replace(target)
    except Exception as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        logger.error(f"Failed to write file: {path}: {e}")
        raise FileWriteError(f"Failed to write file {path}: {e}")
    return len(data)


def delete_file(path: Path) -> None:
    """
    Remove a file.

    Unlike a cleanup helper this does not tolerate a missing file: the
    caller classified the path as existing, so its absence is a failure.

    Args:
        path: Path to remove

    Raises:
        FileDeleteError: If removal fails
    """
    try:
        path.unlink()
    except Exception as e:
        logger.error(f"Failed to delete file: {path}: {e}")
        raise FileDeleteError(f"Failed to delete file {path}: {e}")
