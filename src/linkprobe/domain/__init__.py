"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains entities, value objects, and domain services that form the core
business logic of the application.

Contents:
    * :mod:`.behaviors` - Main application messages (start line, answer line)
    * :mod:`.profile` - Build profile snapshot comparison
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    START_MESSAGE,
    build_start_message,
    format_answer,
)
from .enums import OutputFormat
from .errors import ConfigurationError, ProfilingError
from .profile import ChangedFile, detect_changes, format_timestamp

__all__ = [
    # Behaviors
    "START_MESSAGE",
    "build_start_message",
    "format_answer",
    # Profile
    "ChangedFile",
    "detect_changes",
    "format_timestamp",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "ProfilingError",
]
