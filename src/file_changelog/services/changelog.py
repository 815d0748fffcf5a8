"""Service for classifying and applying changes to a set of files.

Before anything is written the pending operation is classified as a
DiffRecord. A commit only touches the filesystem when the record holds a
change and no error, so unreadable or unverifiable files are never
overwritten blind.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from loguru import logger

from file_changelog import file_utils
from file_changelog.config import BaseLocation, ChangelogConfig
from file_changelog.file_utils import FileError
from file_changelog.history import ChangeHistory
from file_changelog.schemas import (
    ChangeKind,
    Delete,
    DiffRecord,
    Intent,
    PathInfo,
    SizeInfo,
    Write,
    as_intent,
)
from file_changelog.services.inspector import PathInspector

UNKNOWN_EXISTENCE = "path existence could not be determined"
NOTHING_TO_DELETE = "nothing to delete: path does not exist"
UNREADABLE = "content could not be read for comparison"
INVALID_TEXT = "content is not valid UTF-8 text"


@dataclass(frozen=True)
class _CachedDiff:
    path: str
    fingerprint: str
    info: PathInfo
    record: DiffRecord


def _fingerprint(intent: Intent) -> str:
    if isinstance(intent, Delete):
        return "delete"
    # surrogatepass keeps the fingerprint total for text that is not valid UTF-8
    return file_utils.compute_checksum(intent.content.encode("utf-8", "surrogatepass"))


def _is_encodable(content: str) -> bool:
    try:
        content.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class FileChangelog:
    """
    Records changes made to a set of files.

    Features:
    - Dry classification of writes and deletes with diff()
    - Guarded application with commit()
    - Session history of committed paths grouped by outcome
    - Snapshot of the files that existed when the changelog was created
    """

    def __init__(
        self,
        label: str,
        base: Union[BaseLocation, Mapping[str, str]],
        paths: Iterable[Union[str, Path]] = (),
        *,
        inspector: Optional[PathInspector] = None,
        verify_before_commit: bool = True,
    ):
        self._label = label
        self._base = base if isinstance(base, BaseLocation) else BaseLocation(**base)
        self.inspector = inspector or PathInspector()
        self.verify_before_commit = verify_before_commit

        self._history = ChangeHistory()
        self._last_diff: Optional[_CachedDiff] = None
        self._initial = MappingProxyType(
            {info.basename: info for info in map(self.inspector.inspect, paths)}
        )
        logger.debug(f"[{label}] tracking {len(self._initial)} initial files")

    @classmethod
    def from_config(
        cls, config: ChangelogConfig, paths: Iterable[Union[str, Path]] = ()
    ) -> "FileChangelog":
        """Create a changelog from loaded settings."""
        return cls(
            config.label,
            config.base,
            paths,
            verify_before_commit=config.verify_before_commit,
        )

    @property
    def label(self) -> str:
        return self._label

    @property
    def base_dir(self) -> Path:
        return self._base.dir

    @property
    def base_url(self) -> str:
        return self._base.url

    @property
    def initial(self) -> Mapping[str, PathInfo]:
        """Snapshot of the starting files, keyed by basename."""
        return self._initial

    @property
    def history(self) -> ChangeHistory:
        return self._history

    @property
    def last_diff(self) -> Optional[DiffRecord]:
        if self._last_diff is None:
            return None
        return self._last_diff.record.model_copy(deep=True)

    def inspect_path(self, path: Union[str, Path]) -> PathInfo:
        """Get current information for a file path."""
        return self.inspector.inspect(path)

    def url_for(self, path: Union[str, Path]) -> Optional[str]:
        """URL of a file under the base directory, or None outside it."""
        try:
            rel = Path(path).resolve().relative_to(self.base_dir.resolve())
        except (OSError, ValueError):
            return None
        return f"{self.base_url}/{rel.as_posix()}"

    def diff(self, path: Union[str, Path], content: Union[str, Intent]) -> DiffRecord:
        """
        Classify what applying content to a path would do.

        Never modifies the filesystem. The result is cached so an immediate
        commit() for the same path and content can reuse it.

        Args:
            path: The file path
            content: New file content, "" to delete, or a Write/Delete intent

        Returns:
            DiffRecord describing the pending change
        """
        intent = as_intent(content)
        key = str(path)
        info = self.inspector.inspect(path)
        record = self._classify(key, intent, info)

        self._last_diff = _CachedDiff(key, _fingerprint(intent), info, record)
        return record.model_copy(deep=True)

    def _classify(self, key: str, intent: Intent, info: PathInfo) -> DiffRecord:
        record = DiffRecord(path=key, exists=info.exists, size=SizeInfo(before=info.size))

        if isinstance(intent, Write) and not _is_encodable(intent.content):
            record.error = INVALID_TEXT
        elif info.exists is None:
            record.error = UNKNOWN_EXISTENCE
        elif isinstance(intent, Delete):
            if info.exists:
                record.change = ChangeKind.DELETE
            else:
                record.error = NOTHING_TO_DELETE
        elif not info.exists:
            record.change = ChangeKind.CREATE
        else:
            match = self.inspector.is_match(intent.content, key)
            record.match = match
            if match is None:
                record.error = UNREADABLE
            elif not match:
                record.change = ChangeKind.UPDATE

        if record.error:
            logger.warning(f"[{self.label}] {key}: {record.error}")
        else:
            logger.debug(f"[{self.label}] {key}: change={record.change.value}")
        return record

    def _reuse_last_diff(self, key: str, intent: Intent) -> Optional[DiffRecord]:
        cached = self._last_diff
        if cached is None or cached.path != key or cached.fingerprint != _fingerprint(intent):
            return None

        if self.verify_before_commit:
            current = self.inspector.inspect(key)
            if not current.same_state(cached.info):
                logger.info(f"[{self.label}] {key} changed since it was diffed, recomputing")
                return None

        return cached.record.model_copy(deep=True)

    def commit(self, path: Union[str, Path], content: Union[str, Intent]) -> DiffRecord:
        """
        Apply content to a path if the diff allows it.

        Records without a change, or with an error, are returned unchanged
        and nothing is written. Write and delete failures are reported on
        the record and leave the history untouched.

        Args:
            path: The file path
            content: New file content, "" to delete, or a Write/Delete intent

        Returns:
            DiffRecord with post-commit sizes when the change was applied
        """
        intent = as_intent(content)
        key = str(path)

        record = self._reuse_last_diff(key, intent)
        if record is None:
            record = self.diff(path, intent)

        if not record.change or record.error:
            logger.debug(f"[{self.label}] nothing to commit for {key}")
            return record

        target = Path(path)
        try:
            if isinstance(intent, Delete):
                file_utils.delete_file(target)
                after = 0
            else:
                file_utils.ensure_directory(target.parent)
                after = file_utils.write_file_atomic(target, intent.content)
        except FileError as e:
            record.error = str(e)
            self._last_diff = None
            return record

        record.size.after = after
        record.size.change = after - (record.size.before or 0)
        record.committed = True
        self._history.record(key, record.change.value)
        self._last_diff = None

        logger.info(
            f"[{self.label}] {record.change.value} {key} "
            f"({record.size.before or 0} -> {after} bytes)"
        )
        return record
