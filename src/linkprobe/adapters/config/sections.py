"""Typed views over application configuration sections.

Sections are parsed once at the boundary with Pydantic so commands work with
validated values instead of raw dictionaries.
"""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from linkprobe.domain.errors import ConfigurationError

DEFAULT_OUTPUT_CSV = "build_profile.csv"


class ProfilerSettings(BaseModel):
    """Validated ``[profiler]`` section.

    Example:
        >>> ProfilerSettings().output_csv
        'build_profile.csv'
        >>> ProfilerSettings(output_csv="out/profile.csv").output_csv
        'out/profile.csv'
    """

    output_csv: str = DEFAULT_OUTPUT_CSV

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("output_csv")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


def load_profiler_settings(config: Config) -> ProfilerSettings:
    """Parse the ``[profiler]`` section of ``config``.

    Args:
        config: Loaded layered configuration.

    Returns:
        Validated profiler settings; defaults when the section is absent.

    Raises:
        ConfigurationError: If the section holds unknown keys or invalid values.

    Example:
        >>> load_profiler_settings(Config({}, {})).output_csv
        'build_profile.csv'
    """
    raw: object = config.get("profiler", default={})
    try:
        return ProfilerSettings.model_validate(dict(cast("dict[str, object]", raw)) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [profiler] configuration: {exc}") from exc


__all__ = ["DEFAULT_OUTPUT_CSV", "ProfilerSettings", "load_profiler_settings"]
