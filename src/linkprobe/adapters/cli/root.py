"""Root CLI command group and global option handling.

Defines the top-level Click group. Global flags (``--traceback``,
``--profile``, ``--set``) are resolved here once; invoking the group without
a subcommand runs the main application.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from linkprobe import __init__conf__
from linkprobe.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from linkprobe.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, turning malformed input into a UsageError."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'ci', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, and store shared CLI state.

    Without a subcommand the main application runs: start line, library
    greeting, answer line.

    Example:
        >>> from click.testing import CliRunner
        >>> from linkprobe.composition import build_production
        >>> result = CliRunner().invoke(cli, [], obj=build_production)
        >>> result.exit_code
        0
        >>> "The retrieved answer is: 42" in result.output
        True
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    cli_ctx = store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands.run_cmd import execute_main_application

        execute_main_application(cli_ctx)


# Commands import from this package, so registration is deferred until the
# group exists.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_fail,
        cli_info,
        cli_logdemo,
        cli_profile,
        cli_run,
    )

    for cmd in (
        cli_run,
        cli_profile,
        cli_info,
        cli_fail,
        cli_config,
        cli_logdemo,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
