"""Pydantic models describing file state and pending changes.

Key Concepts:
1. PathInfo is a snapshot of one path at inspection time
2. DiffRecord classifies what applying an intent to a path would do
3. Intents say what the caller wants: write content, or delete the file

A None in any optional field means the value is unknown (the query failed)
or does not apply (the path does not exist).
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ChangeKind(str, Enum):
    """The operation a commit would perform.

    NONE is falsy so records read naturally in conditions.
    """

    NONE = "none"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    def __bool__(self) -> bool:
        return self is not ChangeKind.NONE


class PathInfo(BaseModel):
    """Snapshot of a path on the filesystem."""

    model_config = ConfigDict(frozen=True)

    path: str
    basename: str
    # extension without the leading dot, "" when there is none
    ext: str
    filename: str
    exists: Optional[bool] = None
    readable: Optional[bool] = None
    modified: Optional[float] = None
    size: Optional[int] = None

    def same_state(self, other: "PathInfo") -> bool:
        """Whether two snapshots describe the same on-disk state."""
        return (
            self.exists == other.exists
            and self.size == other.size
            and self.modified == other.modified
        )


class SizeInfo(BaseModel):
    """File size before and after a commit, in bytes.

    `after` and `change` are only set once a commit succeeded.
    `change` is after - before, so a grown file yields a positive delta.
    """

    before: Optional[int] = None
    after: Optional[int] = None
    change: Optional[int] = None


class DiffRecord(BaseModel):
    """Classification of a pending change to a single path.

    Example:
    {
        "path": "report.txt",
        "change": "update",
        "exists": true,
        "match": false,
        "error": null,
        "size": {"before": 5, "after": null, "change": null},
        "committed": false
    }
    """

    path: str
    change: ChangeKind = ChangeKind.NONE
    # state before the operation
    exists: Optional[bool] = None
    # True/False after a comparison, None when indeterminate or not compared
    match: Optional[bool] = None
    error: Optional[str] = None
    size: SizeInfo = Field(default_factory=SizeInfo)
    committed: bool = False

    @property
    def is_pending(self) -> bool:
        """True when a commit would touch the filesystem."""
        return bool(self.change) and self.error is None and not self.committed


class Write(BaseModel):
    """Intent to make a file hold exactly `content`.

    An empty string is a legitimate request for an empty file.
    """

    model_config = ConfigDict(frozen=True)

    content: str


class Delete(BaseModel):
    """Intent to remove a file."""

    model_config = ConfigDict(frozen=True)


Intent = Union[Write, Delete]


def as_intent(content: Union[str, Intent]) -> Intent:
    """Normalize a content argument into an intent.

    Plain strings keep the legacy convention: "" means delete, anything
    else means write.
    """
    if isinstance(content, (Write, Delete)):
        return content
    if isinstance(content, str):
        return Delete() if content == "" else Write(content=content)
    raise TypeError(f"Expected str, Write or Delete, got {type(content).__name__}")
