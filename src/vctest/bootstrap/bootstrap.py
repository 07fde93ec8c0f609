"""Wire a registry, a reporter and the runner together."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from vctest.adapters.console_reporter import ConsoleReporter
from vctest.domain.registry import Registry, default_registry
from vctest.service_layer.runner import TestRunner

if TYPE_CHECKING:
    from vctest.interfaces.reporter import Reporter


def build_runner(
    registry: Registry | None = None,
    reporter: Reporter | None = None,
    *,
    stream: TextIO | None = None,
    color: bool | None = None,
) -> TestRunner:
    """Build a runner over *registry* (the default registry when omitted).

    Args:
        registry: Registry to run.
        reporter: Reporter to use; a `ConsoleReporter` on *stream* otherwise.
        stream: Output stream for the default console reporter.
        color: Colour setting for the default console reporter.

    Returns:
        A fresh, not yet started TestRunner.
    """
    if reporter is None:
        reporter = ConsoleReporter(stream=stream, color=color)
    return TestRunner(registry if registry is not None else default_registry(), reporter)


def run_all_tests(registry: Registry | None = None) -> int:
    """Run every registered test and return the failure count.

    ``0`` means every case passed. After a normal run the value is the number
    of failed cases; after a run aborted by a fatal check it is the number
    of cases that did not pass (total minus passed so far).
    """
    return build_runner(registry).run()
