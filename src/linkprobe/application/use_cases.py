"""Use cases orchestrating domain logic through application ports.

Contents:
    * :func:`run_main_application` - Start line, library greeting, answer line.
    * :func:`profile_build` - Scan, build, scan again, and compare.
    * :class:`ProfileResult` - Outcome of a profiling run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..domain.behaviors import build_start_message, format_answer
from ..domain.errors import ProfilingError
from ..domain.profile import ChangedFile, detect_changes
from .ports import GetAnswer, PrintGreeting, RunBuildCommand, ScanDirectory

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def run_main_application(*, print_greeting: PrintGreeting, get_answer: GetAnswer, echo: Echo) -> int:
    """Announce the start, let the library greet, and report its answer.

    Args:
        print_greeting: Library procedure producing the greeting output.
        get_answer: Library function returning the answer.
        echo: Line writer for the application's own output.

    Returns:
        Exit code, always ``0``.

    Example:
        >>> lines: list[str] = []
        >>> run_main_application(
        ...     print_greeting=lambda: lines.append("hi"),
        ...     get_answer=lambda: 42,
        ...     echo=lines.append,
        ... )
        0
        >>> lines
        ['Starting the main application.', 'hi', 'The retrieved answer is: 42']
    """
    echo(build_start_message())
    print_greeting()
    answer = get_answer()
    logger.debug("Library returned answer %d", answer)
    echo(format_answer(answer))
    return 0


@dataclass(slots=True)
class ProfileResult:
    """Outcome of a profiling run."""

    target: Path
    changes: list[ChangedFile] = field(default_factory=list)
    build_command: str | None = None
    build_exit_code: int | None = None

    @property
    def build_failed(self) -> bool:
        return self.build_exit_code not in (None, 0)


def resolve_target_directory(directory: Path | str | None) -> Path:
    """Resolve the profiling target to an absolute existing directory.

    Args:
        directory: Requested directory; ``None`` selects the working directory.

    Returns:
        Absolute, resolved directory path.

    Raises:
        ProfilingError: If the path does not exist or is not a directory.
    """
    target = Path(directory) if directory is not None else Path.cwd()
    target = target.expanduser().resolve()
    if not target.is_dir():
        raise ProfilingError(f"Directory '{target}' does not exist or is not a directory.")
    return target


def profile_build(
    target: Path,
    *,
    build_command: str | None,
    scan_directory: ScanDirectory,
    run_build_command: RunBuildCommand,
    wait_for_build: Callable[[], object],
    echo: Echo,
    exclude: Path | None = None,
) -> ProfileResult:
    """Find the files a build creates or modifies below ``target``.

    Args:
        target: Absolute directory to profile.
        build_command: Shell command to run between the scans. When ``None``
            the user runs the build and ``wait_for_build`` blocks until done.
        scan_directory: Snapshot adapter.
        run_build_command: Build runner adapter.
        wait_for_build: Blocking prompt used when no build command is given.
        echo: Progress line writer.
        exclude: File left out of both snapshots (the report itself).

    Returns:
        The changed files and the build outcome. A failing build is reported,
        not raised.
    """
    result = ProfileResult(target=target, build_command=build_command)

    echo("STEP 1/3: Initial scan...")
    initial = scan_directory(target, exclude=exclude)
    echo(f"Scan complete ({len(initial)} files).")
    echo("")

    if build_command:
        echo(f"STEP 2/3: Running build command: {build_command}")
        result.build_exit_code = run_build_command(build_command, cwd=target)
        if result.build_failed:
            logger.warning("Build command exited with status %d", result.build_exit_code)
            echo(f"WARNING: Build command exited with status {result.build_exit_code}.")
            echo("Profiling continues, but results might reflect an incomplete build.")
        else:
            echo("Build completed.")
    else:
        echo("STEP 2/3: Run your build process now.")
        wait_for_build()
    echo("")

    echo("STEP 3/3: Final scan...")
    final = scan_directory(target, exclude=exclude)
    echo(f"Scan complete ({len(final)} files).")
    echo("")

    result.changes = detect_changes(initial, final)
    logger.info("Build touched %d files", len(result.changes), extra={"target": str(target)})
    return result


__all__ = [
    "ProfileResult",
    "profile_build",
    "resolve_target_directory",
    "run_main_application",
]
