"""Execute the user's build command for the profiler."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_returncode(code: int) -> int:
    """Convert negative signal return codes to POSIX 128+N convention.

    Python's ``subprocess`` reports signal-killed processes as negative values
    (e.g., -2 for SIGINT). POSIX convention is 128+N (e.g., 130 for SIGINT).

    Args:
        code: Raw return code from subprocess.

    Returns:
        POSIX-conventional exit code.

    Example:
        >>> normalize_returncode(-2)
        130
        >>> normalize_returncode(3)
        3
    """
    if code < 0:
        return 128 + abs(code)
    return code


def run_build_command(command: str, *, cwd: Path) -> int:
    """Run ``command`` through the shell with ``cwd`` as working directory.

    The command's own output goes straight to the terminal.

    Args:
        command: Shell command line, e.g. ``make clean all``.
        cwd: Directory the build runs in.

    Returns:
        POSIX-conventional exit status of the command.
    """
    logger.debug("Running build command %r in %s", command, cwd)
    result = subprocess.run(command, shell=True, cwd=cwd, check=False)  # noqa: S602
    return normalize_returncode(result.returncode)


__all__ = ["normalize_returncode", "run_build_command"]
