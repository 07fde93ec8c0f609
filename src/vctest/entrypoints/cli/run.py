"""``vctest run``: load test modules and run the registered tests.

Behavior
- Targets are dotted module names, ``.py`` files or directories (scanned for
  ``--pattern`` files). Without targets, ``VCTEST_PATHS`` is used.
- The GTest-style report goes to **stdout**; status lines and logs go to
  **stderr**.
- The exit code is the runner's result capped at 255: ``0`` when every case
  passed.
"""

from __future__ import annotations

import logging

import click

from vctest import config
from vctest.adapters.discovery import DiscoveryError, load_tests
from vctest.bootstrap import build_runner
from vctest.domain.registry import default_registry
from vctest.logging import log_loaded_tests

from .helpers import report_status

logger = logging.getLogger(__name__)

MAX_EXIT_CODE = 255

MISSING_PATHS_MSG = (
    "No test targets given and VCTEST_PATHS is not set.\n\n"
    "Pass modules, files or directories, e.g.:\n"
    "  vctest run tests/\n"
    "or set the environment variable:\n"
    "  export VCTEST_PATHS='tests'"
)


def _resolve_targets(targets: tuple[str, ...]) -> tuple[str, ...]:
    if targets:
        return targets
    try:
        return tuple(config.get_test_paths())
    except config.TestPathsNotSetError as e:
        raise click.ClickException(MISSING_PATHS_MSG) from e


@click.command()
@click.argument("targets", nargs=-1)
@click.option(
    "--pattern",
    "-p",
    default=config.DEFAULT_TEST_FILE_PATTERN,
    show_default=True,
    help="Glob used to find test files inside directory targets.",
)
@click.pass_context
def run(ctx: click.Context, targets: tuple[str, ...], pattern: str) -> None:
    """Load TARGETS and run every registered test."""
    targets = _resolve_targets(targets)
    try:
        modules = load_tests(targets, pattern)
    except DiscoveryError as e:
        raise click.ClickException(str(e)) from e
    log_loaded_tests(logger, targets, pattern, modules, default_registry())

    runner = build_runner(color=ctx.color)
    result = runner.run()

    report_status(result, runner.stats.total_cases, runner.stats.passed)
    ctx.exit(min(result, MAX_EXIT_CODE))
