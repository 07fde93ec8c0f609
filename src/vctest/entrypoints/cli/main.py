"""vctest CLI entry point.

Defines the top-level ``vctest`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``vctest run``: load test modules and run every registered test.

Notes
- The CLI version is sourced from `vctest.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ vctest --version
    $ vctest run tests/
    $ vctest -v run tests.test_math
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from vctest import __version__, config
from vctest.logging import LogSettings, configure, log_startup, verbosity_level

from .helpers import parse_log_level
from .run import run as run_command

logger = logging.getLogger(__name__)


HELP = """VCTEST command-line interface.

    Runs unit tests registered with ``vctest.define_test`` and prints a
    GTest-style report. The exit code is 0 when every test passed.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (defaults to the user log directory).",
    default=None,
    envvar="VCTEST_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="VCTEST_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on exit if --force-flush is set."
    ),
    default=False,
    envvar="VCTEST_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    envvar="VCTEST_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L asyncio=INFO -L vctest.service_layer=DEBUG) or via "
        "VCTEST_LOGGER_LEVEL (comma/space list)."
    ),
    envvar="VCTEST_LOGGER_LEVEL",
    show_envvar=True,
)
@clickx.pass_context
def vctest(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """VCTEST command-line interface."""
    settings = LogSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        recorder_path=(log_path or config.default_log_path()) if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    configure(settings, color=ctx.color is not False)
    log_startup(logger, __version__, settings)

    ctx.call_on_close(logging.shutdown)


vctest.add_command(run_command)
