"""Sequential test runner.

Runs every registered case, suite by suite, in registration order. The
per-case boundary (`run_case`) is the single place where check signals and
any other error raised by a case body are caught; it turns them into a
closed `CaseOutcome` value the runner switches on:

- passed: counted in ``passed``;
- non-fatal or unrecognized failure: the case's ``suite.case`` name joins
  the failure roll-call and the run continues;
- fatal failure: the run stops at once, with no summary. The returned
  value is then ``total_cases - passed``, not the roll-call length.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from vctest.domain.errors import CaseSucceeded, CheckFailure
from vctest.domain.value_objects import (
    CaseOutcome,
    CheckSignal,
    OutcomeKind,
    RunStatistics,
    SignalKind,
)

if TYPE_CHECKING:
    from vctest.domain.registry import SuiteSnapshot
    from vctest.domain.value_objects import TestCase
    from vctest.interfaces.reporter import Reporter

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
"""Monotonic clock returning nanoseconds."""


class SuiteSource(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that can snapshot its suites, e.g. a `Registry`."""

    def all_suites(self) -> SuiteSnapshot:
        """Return ``(suite_name, cases)`` pairs in run order."""


class RunnerState(Enum):
    """Execution state of a `TestRunner`."""

    NOT_STARTED = "not_started"
    RUNNING_SUITE = "running_suite"
    RUNNING_CASE = "running_case"
    DONE = "done"
    ABORTED = "aborted"


class RunnerAlreadyUsedError(RuntimeError):
    """Raised when `TestRunner.run` is called a second time."""

    def __init__(self) -> None:
        super().__init__("A TestRunner can only run once; build a new one.")


def elapsed_ms(start_ns: int, end_ns: int) -> int:
    """Milliseconds between two clock readings, truncated toward zero."""
    return (end_ns - start_ns) // 1_000_000


def classify(exc: Exception) -> CheckSignal:
    """Map an exception raised by a case body to its signal."""
    if isinstance(exc, CheckFailure):
        return CheckSignal(kind=exc.kind, message=exc.message)
    return CheckSignal(
        kind=SignalKind.UNRECOGNIZED, message=f"{type(exc).__name__}: {exc}"
    )


def run_case(case: TestCase, clock: Clock = time.perf_counter_ns) -> CaseOutcome:
    """Invoke a case body and return how it ended.

    Exceptions that are not `Exception` subclasses (``KeyboardInterrupt``,
    ``SystemExit``) are not caught.

    Args:
        case: The case to run.
        clock: Monotonic nanosecond clock, read right before and after the body.

    Returns:
        CaseOutcome: The outcome, with the body's duration in milliseconds.
    """
    start = clock()
    try:
        case.body()
    except CaseSucceeded:
        return CaseOutcome(OutcomeKind.PASSED, elapsed_ms(start, clock()))
    except Exception as exc:  # pylint: disable=broad-except
        duration = elapsed_ms(start, clock())
        signal = classify(exc)
        if signal.kind is SignalKind.UNRECOGNIZED:
            logger.debug(
                "Unrecognized error in %s", case.qualified_name, exc_info=exc
            )
        return CaseOutcome(OutcomeKind.from_signal(signal.kind), duration, signal)
    return CaseOutcome(OutcomeKind.PASSED, elapsed_ms(start, clock()))


class TestRunner:
    """Runs the suites of a `SuiteSource` once and reports through a `Reporter`.

    Args:
        suites: Source of the suites to run (usually a `Registry`).
        reporter: Receives every run event.
        clock: Monotonic nanosecond clock; injectable for deterministic tests.

    Attributes:
        stats: Statistics of the current (or last) run.
        state: Current `RunnerState`.
    """

    __test__ = False  # not a pytest class

    def __init__(
        self,
        suites: SuiteSource,
        reporter: Reporter,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self._suites = suites
        self._reporter = reporter
        self._clock = clock
        self.stats = RunStatistics()
        self.state = RunnerState.NOT_STARTED

    def run(self) -> int:
        """Run every case and return the failure count (0 means success).

        Raises:
            RunnerAlreadyUsedError: If this runner already ran.
        """
        if self.state is not RunnerState.NOT_STARTED:
            raise RunnerAlreadyUsedError()

        snapshot = [(name, cases) for name, cases in self._suites.all_suites() if cases]
        stats = self.stats
        stats.total_cases = sum(len(cases) for _, cases in snapshot)
        stats.total_suites = len(snapshot)
        logger.info(
            "Running %d case(s) from %d suite(s)", stats.total_cases, stats.total_suites
        )

        run_start = self._clock()
        self._reporter.run_started(stats.total_cases, stats.total_suites)

        for suite_name, cases in snapshot:
            self.state = RunnerState.RUNNING_SUITE
            self._reporter.suite_started(suite_name, len(cases))
            suite_start = self._clock()

            for case in cases:
                self.state = RunnerState.RUNNING_CASE
                if self._run_one(case):
                    self.state = RunnerState.ABORTED
                    result = stats.total_cases - stats.passed
                    logger.warning(
                        "Run aborted by fatal failure in %s", case.qualified_name
                    )
                    return result

            duration = elapsed_ms(suite_start, self._clock())
            stats.suite_durations[suite_name] = duration
            self._reporter.suite_finished(suite_name, len(cases), duration)

        stats.total_duration_ms = elapsed_ms(run_start, self._clock())
        self.state = RunnerState.DONE
        self._reporter.run_finished(stats)
        logger.info("%d passed, %d failed", stats.passed, stats.failed)
        return stats.failed

    def _run_one(self, case: TestCase) -> bool:
        """Run a case and record it; return True when the run must abort."""
        logger.debug("Running %s", case.qualified_name)
        self._reporter.case_started(case)
        outcome = run_case(case, self._clock)
        self._reporter.case_finished(case, outcome)

        if outcome.kind is OutcomeKind.PASSED:
            self.stats.passed += 1
            return False
        if outcome.kind is OutcomeKind.FATAL:
            return True
        self.stats.failed_names.append(case.qualified_name)
        return False
