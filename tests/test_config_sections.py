"""Configuration loading and typed section stories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from linkprobe.adapters.config.loader import get_config, get_default_config_path, validate_profile
from linkprobe.adapters.config.sections import ProfilerSettings, load_profiler_settings
from linkprobe.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_default_config_file_is_bundled() -> None:
    """defaultconfig.toml ships next to the loader."""
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_get_config_exposes_profiler_default(clear_config_cache: None) -> None:
    """The bundled defaults define the report file name."""
    assert get_config().get("profiler.output_csv") == "build_profile.csv"


@pytest.mark.os_agnostic
def test_get_config_is_cached(clear_config_cache: None) -> None:
    """Repeated calls return the same Config instance."""
    assert get_config() is get_config()


@pytest.mark.os_agnostic
def test_invalid_profile_name_is_rejected() -> None:
    """Path traversal in a profile name raises ValueError."""
    with pytest.raises(ValueError):
        validate_profile("../etc")


@pytest.mark.os_agnostic
def test_profiler_settings_default_when_section_missing(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A missing section yields defaults."""
    assert load_profiler_settings(config_factory({})) == ProfilerSettings()


@pytest.mark.os_agnostic
def test_profiler_settings_read_configured_value(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """The configured path is used."""
    settings = load_profiler_settings(config_factory({"profiler": {"output_csv": "out/p.csv"}}))

    assert settings.output_csv == "out/p.csv"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("section", [{"output_csv": ""}, {"output_csv": "x.csv", "unknown": 1}])
def test_profiler_settings_reject_invalid_section(
    config_factory: Callable[[dict[str, Any]], Config],
    section: dict[str, Any],
) -> None:
    """Blank paths and unknown keys are configuration errors."""
    with pytest.raises(ConfigurationError, match=r"\[profiler\]"):
        load_profiler_settings(config_factory({"profiler": section}))
