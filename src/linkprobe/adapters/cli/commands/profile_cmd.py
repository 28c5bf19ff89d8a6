"""CLI command profiling which files a build creates or modifies.

Contents:
    * :func:`cli_profile` - ``linkprobe profile [DIRECTORY] [-b COMMAND...]``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from linkprobe.adapters.config.sections import load_profiler_settings
from linkprobe.adapters.profiler.report import render_profile_table, write_profile_csv
from linkprobe.application.use_cases import profile_build, resolve_target_directory
from linkprobe.domain.errors import ConfigurationError, ProfilingError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_BUILD_FLAGS = ("-b", "--build-command")
_OUTPUT_FLAG = "--output"


def split_build_arguments(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate profiler arguments from the build command tokens.

    Everything after the first ``-b``/``--build-command`` belongs to the
    build command, except ``--output PATH`` which is still handed to the
    profiler. A ``--`` ends that exception: the rest goes to the build
    verbatim.

    Returns:
        ``(profiler_args, build_tokens)``; ``profiler_args`` keeps the
        build flag itself so Click still records that it was given.

    Examples:
        >>> split_build_arguments(["src", "-b", "make", "clean", "all"])
        (['src', '-b'], ['make', 'clean', 'all'])
        >>> split_build_arguments(["-b", "make", "--output", "r.csv"])
        (['-b', '--output', 'r.csv'], ['make'])
        >>> split_build_arguments(["-b", "cc", "--", "--output", "a.out"])
        (['-b'], ['cc', '--output', 'a.out'])
        >>> split_build_arguments(["src"])
        (['src'], [])
    """
    for index, arg in enumerate(args):
        if arg in _BUILD_FLAGS:
            break
    else:
        return list(args), []

    profiler_args = list(args[: index + 1])
    build_tokens: list[str] = []
    tail = iter(args[index + 1 :])
    for arg in tail:
        if arg == "--":
            build_tokens.extend(tail)
        elif arg == _OUTPUT_FLAG:
            profiler_args.append(arg)
            value = next(tail, None)
            if value is not None:
                profiler_args.append(value)
        elif arg.startswith(f"{_OUTPUT_FLAG}="):
            profiler_args.append(arg)
        else:
            build_tokens.append(arg)
    return profiler_args, build_tokens


class ProfileCommand(click.RichCommand):
    """Rich command whose ``-b`` swallows the remaining arguments as the build command."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        profiler_args, build_tokens = split_build_arguments(args)
        remaining = super().parse_args(ctx, profiler_args)
        ctx.params["build_tokens"] = tuple(build_tokens)
        return remaining


def _wait_for_build() -> None:
    click.prompt("Press Enter to continue after build", default="", show_default=False)


def _resolve_output(output: Path | None, configured: str) -> Path:
    """Absolute report path; relative paths are anchored at the working directory."""
    path = output if output is not None else Path(configured)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path.resolve()


@click.command("profile", cls=ProfileCommand, context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("directory", required=False, type=click.Path(path_type=Path))
@click.option(
    "-b",
    "--build-command",
    "run_build",
    is_flag=True,
    default=False,
    help="Run a build between the scans; every argument after -b forms the build command. "
    "Without it you are prompted to run the build yourself.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="CSV report path (default: [profiler].output_csv)",
)
@click.pass_context
def cli_profile(
    ctx: click.Context,
    directory: Path | None,
    run_build: bool,
    output: Path | None,
    build_tokens: tuple[str, ...] = (),
) -> None:
    """Profile a build by comparing file timestamps before and after it.

    Writes every new or modified file with its last modification time to a
    CSV report and prints the same list as a table.

    Example:
        linkprobe profile                                # current dir, manual build
        linkprobe profile ./test_project -b make clean all
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services

    build_command: str | None = None
    if run_build:
        if not build_tokens:
            raise click.UsageError("Option '-b' requires a build command.", ctx=ctx)
        build_command = " ".join(build_tokens)

    try:
        settings = load_profiler_settings(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    try:
        target = resolve_target_directory(directory)
    except ProfilingError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc

    output_path = _resolve_output(output, settings.output_csv)

    with lib_log_rich.runtime.bind(job_id="cli-profile", extra={"command": "profile", "target": str(target)}):
        logger.info("Profiling build", extra={"build_command": build_command, "output": str(output_path)})
        click.echo("--- Build Profiler ---")
        click.echo(f"Target: {target}")
        click.echo(f"Output: {output_path}")
        click.echo("")

        result = profile_build(
            target,
            build_command=build_command,
            scan_directory=services.scan_directory,
            run_build_command=services.run_build_command,
            wait_for_build=_wait_for_build,
            echo=click.echo,
            exclude=output_path,
        )

        click.echo("Comparing files and generating CSV...")
        try:
            write_profile_csv(output_path, result.changes)
        except PermissionError as exc:
            click.echo(f"Error: cannot write '{output_path}': {exc.strerror}", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        except FileNotFoundError as exc:
            click.echo(f"Error: cannot write '{output_path}': {exc.strerror}", err=True)
            raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc
        except IsADirectoryError as exc:
            click.echo(f"Error: cannot write '{output_path}': {exc.strerror}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(f"Build profiling complete. Results saved to '{output_path}'.")
        click.echo("")

        render_profile_table(result.changes)


__all__ = ["ProfileCommand", "cli_profile", "split_build_arguments"]
