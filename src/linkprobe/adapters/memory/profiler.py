"""In-memory profiler adapters for testing.

:class:`ScriptedFilesystem` hands out prepared snapshots in order and
records every build command instead of running it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class ScriptedFilesystem:
    """Return ``snapshots`` one per scan; report ``build_exit_code`` for builds.

    Example:
        >>> fs = ScriptedFilesystem(snapshots=[{"/p/a.c": 1}, {"/p/a.c": 1, "/p/a.o": 2}])
        >>> fs.scan_directory(Path("/p"))
        {'/p/a.c': 1}
        >>> fs.run_build_command("make", cwd=Path("/p"))
        0
        >>> fs.scan_directory(Path("/p"))
        {'/p/a.c': 1, '/p/a.o': 2}
        >>> [command for command, _cwd in fs.builds]
        ['make']
    """

    snapshots: Sequence[dict[str, int]] = ()
    build_exit_code: int = 0
    scans: list[tuple[Path, Path | None]] = field(default_factory=list)
    builds: list[tuple[str, Path]] = field(default_factory=list)

    def scan_directory(self, root: Path, *, exclude: Path | None = None) -> dict[str, int]:
        index = len(self.scans)
        self.scans.append((root, exclude))
        if not self.snapshots:
            return {}
        return dict(self.snapshots[min(index, len(self.snapshots) - 1)])

    def run_build_command(self, command: str, *, cwd: Path) -> int:
        self.builds.append((command, cwd))
        return self.build_exit_code


__all__ = ["ScriptedFilesystem"]
