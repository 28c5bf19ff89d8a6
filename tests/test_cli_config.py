"""CLI config stories: display, JSON format, sections, profile, overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from linkprobe.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_configuration(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The bundled defaults include the profiler section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0
    assert "output_csv" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--format json prints JSON on stdout."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """An unknown section is INVALID_ARGUMENT."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_mocked_data_it_displays_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Injected configuration is displayed verbatim."""
    factory = config_cli_context({"profiler": {"output_csv": "reports/profile.csv"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "profiler" in result.stdout
    assert "reports/profile.csv" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_json_section_is_requested_only_that_section_is_shown(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """JSON output restricted to one section."""
    factory = config_cli_context({"profiler": {"output_csv": "a.csv"}, "other": {"k": 1}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "profiler"], obj=factory
    )

    assert result.exit_code == 0
    assert "a.csv" in result.stdout
    assert "other" not in result.stdout


@pytest.mark.os_agnostic
def test_set_override_is_visible_in_config_output(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """--set values are merged before display."""
    factory = config_cli_context({"profiler": {"output_csv": "a.csv"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "profiler.output_csv=b.csv", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "b.csv" in result.stdout
    assert "a.csv" not in result.stdout


@pytest.mark.os_agnostic
def test_subcommand_profile_reloads_config_and_reapplies_overrides(
    cli_runner: CliRunner,
    services_context: Callable[..., Any],
) -> None:
    """config --profile reloads configuration with the root --set overrides."""
    from dataclasses import replace

    from lib_layered_config import Config

    captured: list[str | None] = []

    def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
        captured.append(profile)
        return Config({"profiler": {"output_csv": f"{profile}.csv"}, "extra": {"flag": False}}, {})

    services = replace(services_context().factory(), get_config=_capturing_get_config)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "extra.flag=true", "config", "--profile", "ci", "--format", "json"],
        obj=lambda: services,
    )

    assert result.exit_code == 0
    assert captured == [None, "ci"]
    assert "ci.csv" in result.stdout
