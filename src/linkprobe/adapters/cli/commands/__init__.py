"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Main application command from :mod:`.run_cmd`
    * Build profiler command from :mod:`.profile_cmd`
    * Info commands from :mod:`.info`
    * Config command from :mod:`.config`
    * Logging commands from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_fail, cli_info
from .logging import cli_logdemo
from .profile_cmd import cli_profile
from .run_cmd import cli_run

__all__ = [
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_logdemo",
    "cli_profile",
    "cli_run",
]
