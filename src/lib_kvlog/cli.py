"""Click command-line interface for rendering key/value log lines.

Purpose
-------
Expose the writer to shell pipelines (``some-tool | lib_kvlog render``) and
provide a demo of the :mod:`logging` bridge.

Contents
--------
* :func:`cli` - root group with traceback and ``.env`` toggles.
* ``info`` / ``render`` / ``demo`` subcommands.
* :func:`main` - entry point delegating exit-code handling to
  ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters import KvlogHandler, KvWriter

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

DEMO_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Render key/value log records as wrapped terminal output."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


def _writer_options(function):
    function = click.option("--width", type=click.IntRange(min=1), default=None, help="Fixed output width.")(function)
    function = click.option("--plain", is_flag=True, help="No colour and no terminal sizing.")(function)
    function = click.option("--force-color", is_flag=True, help="Colour even when not writing to a terminal.")(function)
    function = click.option("--no-color", is_flag=True, help="Never emit colour escape sequences.")(function)
    function = click.option("--verbose", "-v", is_flag=True, help="Show debug: and trace: records.")(function)
    return function


def _build_writer(**options: object) -> KvWriter:
    settings = config_module.build_writer_settings(**options)  # type: ignore[arg-type]
    return KvWriter.from_settings(sys.stdout, settings)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("messages", nargs=-1)
@_writer_options
def cli_render(
    messages: tuple[str, ...],
    verbose: bool,
    no_color: bool,
    force_color: bool,
    plain: bool,
    width: int | None,
) -> None:
    """Render MESSAGES (or stdin lines) written as ``text key=value ...``."""

    writer = _build_writer(verbose=verbose, no_color=no_color, force_color=force_color, plain=plain, width=width)
    lines: Iterable[str] = messages if messages else sys.stdin
    for line in lines:
        writer.write(line)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_writer_options
def cli_demo(verbose: bool, no_color: bool, force_color: bool, plain: bool, width: int | None) -> None:
    """Emit sample records through the standard logging package."""

    writer = _build_writer(verbose=verbose, no_color=no_color, force_color=force_color, plain=plain, width=width)
    handler = KvlogHandler(writer=writer)
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", DEMO_DATE_FORMAT))
    demo_logger = logging.getLogger(f"{__init__conf__.name}.demo")
    demo_logger.addHandler(handler)
    demo_logger.setLevel(logging.DEBUG)
    demo_logger.propagate = False
    try:
        _run_demo(demo_logger)
    finally:
        demo_logger.removeHandler(handler)
        handler.close()


def _run_demo(demo_logger: logging.Logger) -> None:
    demo_logger.info("service started", extra={"port": 8080, "workers": 4})
    demo_logger.info("debug: cache warmed, shown with --verbose only", extra={"entries": 512})
    demo_logger.info(
        "replicating snapshot to the secondary site, this message is long enough to wrap on narrow terminals,"
        " continuation lines line up under the timestamp",
        extra={"snapshot": "2024-01-02T15:04:05Z", "bytes": 734003200, "target": "backup eu-west"},
    )
    demo_logger.error("error: disk full on /var/lib/data", extra={"used": "98 %"})


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
