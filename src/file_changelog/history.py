"""Session history of committed changes."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from file_changelog.schemas import ChangeKind

ERROR_BUCKET = "error"
BUCKETS = (
    ChangeKind.CREATE.value,
    ChangeKind.UPDATE.value,
    ChangeKind.DELETE.value,
    ERROR_BUCKET,
    ChangeKind.NONE.value,
)


@dataclass
class ChangeHistory:
    """Paths grouped by the outcome of their commit.

    Attributes:
        create: Files written that did not exist before
        update: Existing files overwritten with different content
        delete: Files removed
        error: Paths a caller filed as failed; commit() never records here
        none: Paths recorded without a filesystem change
        all: Every recorded path, in recording order
    """

    create: List[str] = field(default_factory=list)
    update: List[str] = field(default_factory=list)
    delete: List[str] = field(default_factory=list)
    error: List[str] = field(default_factory=list)
    none: List[str] = field(default_factory=list)
    all: List[str] = field(default_factory=list)
    _log: List[Tuple[str, str]] = field(default_factory=list, repr=False)

    def record(self, path: str, bucket: str) -> None:
        """Append a path to a bucket. Entries are never removed."""
        if isinstance(bucket, ChangeKind):
            bucket = bucket.value
        if bucket not in BUCKETS:
            raise ValueError(f"Unknown history bucket: {bucket}")
        getattr(self, bucket).append(path)
        self.all.append(path)
        self._log.append((bucket, path))

    def bucket(self, name: str) -> List[str]:
        """Copy of the paths in one bucket."""
        if isinstance(name, ChangeKind):
            name = name.value
        if name not in BUCKETS and name != "all":
            raise ValueError(f"Unknown history bucket: {name}")
        return list(getattr(self, name))

    def items(self) -> Iterator[Tuple[str, str]]:
        """(bucket, path) pairs in recording order."""
        return iter(list(self._log))

    @property
    def total(self) -> int:
        """Number of recorded commits."""
        return len(self.all)

    def as_dict(self) -> Dict[str, List[str]]:
        return {name: list(getattr(self, name)) for name in BUCKETS + ("all",)}
