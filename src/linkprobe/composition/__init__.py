"""Composition root wiring adapters to application ports.

This is where the main application is "linked" against its greeting
library: production wiring uses :mod:`linkprobe.adapters.library`, test
wiring substitutes a :class:`~linkprobe.adapters.memory.LibrarySpy`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Greeting library
from ..adapters.library import get_answer, print_greeting

# Logging services
from ..adapters.logging.setup import init_logging

# Build profiler services
from ..adapters.profiler import run_build_command, scan_directory

# Static conformance assertions — pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import LibrarySpy, ScriptedFilesystem
    from ..application.ports import (
        DisplayConfig,
        GetAnswer,
        GetConfig,
        InitLogging,
        PrintGreeting,
        RunBuildCommand,
        ScanDirectory,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_print_greeting: PrintGreeting = print_greeting
    _assert_get_answer: GetAnswer = get_answer
    _assert_scan_directory: ScanDirectory = scan_directory
    _assert_run_build_command: RunBuildCommand = run_build_command


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    print_greeting: PrintGreeting
    get_answer: GetAnswer
    scan_directory: ScanDirectory
    run_build_command: RunBuildCommand


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        print_greeting=print_greeting,
        get_answer=get_answer,
        scan_directory=scan_directory,
        run_build_command=run_build_command,
    )


def build_testing(
    *,
    library: LibrarySpy | None = None,
    filesystem: ScriptedFilesystem | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        library: Optional LibrarySpy; a fresh one answering 42 when None.
        filesystem: Optional ScriptedFilesystem; an empty one when None.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        LibrarySpy,
        ScriptedFilesystem,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    library_spy = library if library is not None else LibrarySpy()
    fake_fs = filesystem if filesystem is not None else ScriptedFilesystem()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        print_greeting=library_spy.print_greeting,
        get_answer=library_spy.get_answer,
        scan_directory=fake_fs.scan_directory,
        run_build_command=fake_fs.run_build_command,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # Greeting library
    "print_greeting",
    "get_answer",
    # Build profiler
    "scan_directory",
    "run_build_command",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
