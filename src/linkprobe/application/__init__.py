"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.use_cases` - Main application and build profiling workflows
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetAnswer,
    GetConfig,
    InitLogging,
    PrintGreeting,
    RunBuildCommand,
    ScanDirectory,
)
from .use_cases import ProfileResult, profile_build, resolve_target_directory, run_main_application

__all__ = [
    "DisplayConfig",
    "GetAnswer",
    "GetConfig",
    "InitLogging",
    "PrintGreeting",
    "ProfileResult",
    "RunBuildCommand",
    "ScanDirectory",
    "profile_build",
    "resolve_target_directory",
    "run_main_application",
]
