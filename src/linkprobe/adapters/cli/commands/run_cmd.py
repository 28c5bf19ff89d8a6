"""CLI command running the main application.

Contents:
    * :func:`execute_main_application` - Shared by ``run`` and the bare root group.
    * :func:`cli_run` - ``linkprobe run``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from linkprobe.application.use_cases import run_main_application

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)


def execute_main_application(cli_ctx: CLIContext) -> None:
    """Run the main application against the wired greeting library.

    Raises:
        SystemExit: If the application reports a non-zero exit code.
    """
    services = cli_ctx.services
    with lib_log_rich.runtime.bind(job_id="cli-run", extra={"command": "run"}):
        logger.info("Starting main application")
        exit_code = run_main_application(
            print_greeting=services.print_greeting,
            get_answer=services.get_answer,
            echo=click.echo,
        )
    if exit_code != 0:
        raise SystemExit(exit_code)


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_run(ctx: click.Context) -> None:
    """Print the start line, the library greeting, and the library's answer.

    Same as invoking ``linkprobe`` without a subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from linkprobe.adapters.cli.root import cli
        >>> from linkprobe.composition import build_production
        >>> result = CliRunner().invoke(cli, ["run"], obj=build_production)
        >>> result.output.splitlines()[0]
        'Starting the main application.'
    """
    execute_main_application(get_cli_context(ctx))


__all__ = ["cli_run", "execute_main_application"]
