"""Read-only filesystem queries that never raise."""

import os
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from file_changelog.file_utils import FileError, compute_checksum
from file_changelog.schemas import PathInfo


class PathInspector:
    """
    Stateless inspector for file paths.

    Every query catches filesystem faults (permission denied, I/O errors,
    a file vanishing mid-call) and returns None for the value that failed,
    so a single bad field never hides the rest of the snapshot.
    """

    def exists(self, path: Union[str, Path]) -> Optional[bool]:
        """True/False, or None if existence could not be determined."""
        try:
            os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to check file existence {path}: {e}")
            return None
        return True

    def readable(self, path: Union[str, Path]) -> Optional[bool]:
        try:
            return os.access(path, os.R_OK)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to check readability {path}: {e}")
            return None

    def modified(self, path: Union[str, Path]) -> Optional[float]:
        try:
            return Path(path).stat().st_mtime
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read modification time {path}: {e}")
            return None

    def size(self, path: Union[str, Path]) -> Optional[int]:
        try:
            return Path(path).stat().st_size
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read file size {path}: {e}")
            return None

    def read_bytes(self, path: Union[str, Path]) -> Optional[bytes]:
        """Full file content, or None if it could not be read."""
        try:
            return Path(path).read_bytes()
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read file {path}: {e}")
            return None

    def inspect(self, path: Union[str, Path]) -> PathInfo:
        """
        Take a snapshot of a path.

        Name parts come from the path string alone. Readability, size and
        modification time are only queried when the path is known to exist.

        Args:
            path: Path to inspect

        Returns:
            PathInfo for the path at call time
        """
        p = Path(path)
        suffix = p.suffix
        info = {
            "path": str(path),
            "basename": p.name,
            "ext": suffix[1:] if suffix else "",
            "filename": p.stem,
            "exists": self.exists(path),
        }
        if info["exists"]:
            info["readable"] = self.readable(path)
            info["modified"] = self.modified(path)
            info["size"] = self.size(path)

        logger.debug(f"inspected {path}: {info}")
        return PathInfo(**info)

    def is_match(self, candidate: str, path: Union[str, Path]) -> Optional[bool]:
        """
        Does the candidate content match the current file byte for byte.

        Args:
            candidate: Proposed content, compared as UTF-8 bytes
            path: A path to an existing file

        Returns:
            True or False, or None when the current content could not be read
        """
        if not self.readable(path):
            logger.warning(f"File is not readable for comparison: {path}")
            return None

        current = self.read_bytes(path)
        if current is None:
            return None

        try:
            return compute_checksum(candidate) == compute_checksum(current)
        except FileError:
            return None
