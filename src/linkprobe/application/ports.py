"""Application ports — callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``)
    are imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class PrintGreeting(Protocol):
    """Emit the greeting library's greeting."""

    def __call__(self) -> None: ...


class GetAnswer(Protocol):
    """Return the greeting library's answer constant."""

    def __call__(self) -> int: ...


class ScanDirectory(Protocol):
    """Record modification times of every regular file below ``root``."""

    def __call__(self, root: Path, *, exclude: Path | None = ...) -> dict[str, int]: ...


class RunBuildCommand(Protocol):
    """Run a shell build command inside ``cwd`` and return its exit code."""

    def __call__(self, command: str, *, cwd: Path) -> int: ...


__all__ = [
    "DisplayConfig",
    "GetAnswer",
    "GetConfig",
    "InitLogging",
    "PrintGreeting",
    "RunBuildCommand",
    "ScanDirectory",
]
