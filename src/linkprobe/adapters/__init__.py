"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks.

Contents:
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.library` - The greeting library the main application links against
    * :mod:`.profiler` - Filesystem scans, build execution, and reports
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
