"""Shared pytest fixtures for CLI, profiler, and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from linkprobe.adapters.memory import LibrarySpy, ScriptedFilesystem
    from linkprobe.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the order or exact content of the program's
    own output matters; log records are written to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from linkprobe.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from linkprobe.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class ServicesContext:
    """Services factory plus the doubles wired into it.

    Attributes:
        factory: Callable passed as ``obj`` to ``cli_runner.invoke``.
        library: LibrarySpy standing in for the greeting library.
        filesystem: ScriptedFilesystem, or None when the real profiler
            adapters are wired.
    """

    factory: Callable[[], Any]
    library: LibrarySpy
    filesystem: ScriptedFilesystem | None


@pytest.fixture
def services_context(clear_config_cache: None) -> Callable[..., ServicesContext]:
    """Build a services factory around production logging and display.

    Only the I/O boundaries a test names are replaced: ``config`` replaces
    configuration loading, ``library`` the greeting library, ``filesystem``
    the profiler's scans and build runs. Everything else stays production.

    Example:
        def test_answer(cli_runner, services_context) -> None:
            ctx = services_context(library=LibrarySpy(answer=7))
            result = cli_runner.invoke(cli, ["run"], obj=ctx.factory)
            assert "The retrieved answer is: 7" in result.stdout
    """
    from linkprobe.adapters.memory import LibrarySpy
    from linkprobe.composition import build_production

    def _create(
        *,
        config: dict[str, Any] | None = None,
        library: LibrarySpy | None = None,
        filesystem: ScriptedFilesystem | None = None,
    ) -> ServicesContext:
        spy = library if library is not None else LibrarySpy()
        services = replace(
            build_production(),
            print_greeting=spy.print_greeting,
            get_answer=spy.get_answer,
        )
        if config is not None:
            loaded = Config(config, {})

            def _fake_get_config(**_kwargs: Any) -> Config:
                return loaded

            services = replace(services, get_config=_fake_get_config)
        if filesystem is not None:
            services = replace(
                services,
                scan_directory=filesystem.scan_directory,
                run_build_command=filesystem.run_build_command,
            )
        return ServicesContext(factory=lambda: services, library=spy, filesystem=filesystem)

    return _create


@pytest.fixture
def config_cli_context(
    services_context: Callable[..., ServicesContext],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory turning a config dict into a services factory."""

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return services_context(config=config_data).factory

    return _create


@pytest.fixture
def build_tree(tmp_path: Path) -> Path:
    """Create a small C project resembling the linkage test program."""
    project = tmp_path / "test_project"
    project.mkdir()
    (project / "main.c").write_text('#include "my_lib.h"\nint main(void) { return 0; }\n', encoding="utf-8")
    (project / "my_lib.c").write_text("int get_answer(void) { return 42; }\n", encoding="utf-8")
    (project / "my_lib.h").write_text("int get_answer(void);\n", encoding="utf-8")
    return project
