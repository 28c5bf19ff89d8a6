"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely
in memory -- no filesystem, no subprocesses, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.library` - Greeting library spy
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.profiler` - Scripted snapshots and recorded builds
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
)
from .library import LibrarySpy
from .logging import init_logging_in_memory
from .profiler import ScriptedFilesystem

# Static conformance assertions
if TYPE_CHECKING:
    from linkprobe.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "LibrarySpy",
    "ScriptedFilesystem",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
