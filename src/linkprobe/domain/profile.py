"""Build profile comparison: which files did a build create or touch.

A snapshot maps absolute file paths to their modification time in whole
epoch seconds. Comparing the snapshot taken before a build with the one
taken after it yields the files the build produced or modified.

Contents:
    * :class:`ChangedFile` - One reported file with its final timestamp.
    * :func:`detect_changes` - Compare two snapshots.
    * :func:`format_timestamp` - Render epoch seconds as local wall time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

Snapshot = Mapping[str, int]
"""Absolute file path to modification time (epoch seconds)."""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


@dataclass(frozen=True, slots=True)
class ChangedFile:
    """A file that is new after the build or whose timestamp moved."""

    path: str
    modified: int

    @property
    def modified_display(self) -> str:
        """Local wall-clock rendering of :attr:`modified`."""
        return format_timestamp(self.modified)


def detect_changes(initial: Snapshot, final: Snapshot) -> list[ChangedFile]:
    """Return files that are new or carry a different timestamp after the build.

    Files present only in ``initial`` (deleted by the build) are not reported.

    Args:
        initial: Snapshot taken before the build.
        final: Snapshot taken after the build.

    Returns:
        Changed files ordered by path.

    Example:
        >>> before = {"/p/a.c": 100, "/p/b.c": 100, "/p/gone.o": 50}
        >>> after = {"/p/a.c": 100, "/p/b.c": 130, "/p/b.o": 131}
        >>> [c.path for c in detect_changes(before, after)]
        ['/p/b.c', '/p/b.o']
    """
    changed = [
        ChangedFile(path=path, modified=modified)
        for path, modified in final.items()
        if initial.get(path) != modified
    ]
    return sorted(changed, key=lambda item: item.path)


def format_timestamp(epoch_seconds: int) -> str:
    """Render ``epoch_seconds`` in local time with the timezone abbreviation.

    Example:
        >>> len(format_timestamp(0)) >= len("1970-01-01 00:00:00")
        True
    """
    return datetime.fromtimestamp(epoch_seconds).astimezone().strftime(TIMESTAMP_FORMAT)


__all__ = [
    "TIMESTAMP_FORMAT",
    "ChangedFile",
    "Snapshot",
    "detect_changes",
    "format_timestamp",
]
