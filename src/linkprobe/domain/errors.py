"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent, malformed, or
    logically inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from linkprobe.domain.errors import ConfigurationError
        >>> err = ConfigurationError("profiler.output_csv must not be empty")
        >>> str(err)
        'profiler.output_csv must not be empty'
    """


class ProfilingError(Exception):
    """The build profiler cannot inspect the requested directory.

    Raised when the profiling target does not exist or is not a directory.

    Example:
        >>> from linkprobe.domain.errors import ProfilingError
        >>> err = ProfilingError("Directory '/nope' does not exist or is not a directory.")
        >>> str(err)
        "Directory '/nope' does not exist or is not a directory."
    """


__all__ = [
    "ConfigurationError",
    "ProfilingError",
]
