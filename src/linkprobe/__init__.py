"""Public package surface exposing the main application, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: main application messages
- Application exports: the main application use case
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.use_cases import run_main_application

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    START_MESSAGE,
    build_start_message,
    format_answer,
)

__all__ = [
    "START_MESSAGE",
    "build_start_message",
    "format_answer",
    "get_config",
    "print_info",
    "run_main_application",
]
