"""Snapshot modification times of every regular file below a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def scan_directory(root: Path, *, exclude: Path | None = None) -> dict[str, int]:
    """Record ``{absolute_path: mtime_seconds}`` for files below ``root``.

    Symbolic links are not followed and are not reported. Files that vanish
    between listing and ``stat`` or cannot be read are skipped with a warning.

    Args:
        root: Absolute directory to walk.
        exclude: Optional file to leave out of the snapshot.

    Returns:
        Mapping of absolute file paths to whole-second modification times.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     _ = (Path(tmp) / "main.c").write_text("int main(void);")
        ...     sorted(Path(p).name for p in scan_directory(Path(tmp)))
        ['main.c']
    """
    excluded = str(exclude.resolve()) if exclude is not None else None
    snapshot: dict[str, int] = {}

    def _on_error(exc: OSError) -> None:
        logger.warning("Could not read directory %s: %s", exc.filename, exc.strerror)

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_error):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            if path == excluded or os.path.islink(path):
                continue
            try:
                stat = os.stat(path)
            except OSError as exc:
                logger.warning("Could not stat file: %s (%s)", path, exc.strerror)
                continue
            snapshot[path] = int(stat.st_mtime)
    return snapshot


__all__ = ["scan_directory"]
