"""GTest-style console reporter.

Writes the line-oriented, bracket-tagged layout CI tooling already parses
for GoogleTest output. Formatting helpers are pure functions; the reporter
only decides where and in which colour the lines go.

Example output::

    [==========] Running 2 tests from 1 test suite.
    [----------] Global test environment set-up.
    [----------] 2 tests from Math
    [ RUN      ] Math.Add
    [       OK ] Math.Add (0 ms)
    [ RUN      ] Math.Div
    [  EXPECT  ] 1 / 2 != 0
    [  FAILED  ] Math.Div (0 ms)
    [----------] 2 tests from Math (0 ms total)

    [----------] Global test environment tear-down
    [==========] 2 tests from 1 test suite ran. (0 ms total)
    [  PASSED  ] 1 test.
    [  FAILED  ] 1 test, listed below:
    [  FAILED  ] Math.Div

     1 FAILED TEST
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from vctest.domain.value_objects import OutcomeKind
from vctest.interfaces.reporter import Reporter

if TYPE_CHECKING:
    from vctest.domain.value_objects import CaseOutcome, RunStatistics, TestCase

TAG_BANNER = "[==========]"
TAG_SEPARATOR = "[----------]"
TAG_RUN = "[ RUN      ]"
TAG_OK = "[       OK ]"
TAG_FAILED = "[  FAILED  ]"
TAG_PASSED = "[  PASSED  ]"
TAG_ASSERT = "[  ASSERT  ]"
TAG_EXPECT = "[  EXPECT  ]"
TAG_UNKNOWN = "[ UNKNOWN  ]"

FAILURE_TAGS = {
    OutcomeKind.FATAL: TAG_ASSERT,
    OutcomeKind.NON_FATAL: TAG_EXPECT,
    OutcomeKind.UNRECOGNIZED: TAG_UNKNOWN,
}

_TAG_COLORS = {
    TAG_OK: "green",
    TAG_PASSED: "green",
    TAG_FAILED: "red",
    TAG_ASSERT: "red",
    TAG_EXPECT: "yellow",
    TAG_UNKNOWN: "magenta",
}


# ---------------------------------------------------------------------------
# Pure formatting
# ---------------------------------------------------------------------------


def pluralize(count: int, word: str) -> str:
    """Return ``"1 test"`` or ``"N tests"``."""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_tests_and_suites(total_cases: int, total_suites: int) -> str:
    """E.g. ``"3 tests from 2 test suites"``."""
    return f"{pluralize(total_cases, 'test')} from {pluralize(total_suites, 'test suite')}"


def format_run_header(total_cases: int, total_suites: int) -> list[str]:
    """Lines printed before the first suite."""
    return [
        f"{TAG_BANNER} Running {format_tests_and_suites(total_cases, total_suites)}.",
        f"{TAG_SEPARATOR} Global test environment set-up.",
    ]


def format_suite_header(suite_name: str, case_count: int) -> str:
    """Line printed before a suite's first case."""
    return f"{TAG_SEPARATOR} {pluralize(case_count, 'test')} from {suite_name}"


def format_suite_footer(suite_name: str, case_count: int, duration_ms: int) -> str:
    """Line printed after a suite's last case."""
    return (
        f"{TAG_SEPARATOR} {pluralize(case_count, 'test')} from {suite_name} "
        f"({duration_ms} ms total)"
    )


def format_case_result(case: TestCase, outcome: CaseOutcome) -> list[str]:
    """Lines describing a finished case: the failure message, then OK/FAILED."""
    timing = f"{case.qualified_name} ({outcome.duration_ms} ms)"
    if outcome.passed:
        return [f"{TAG_OK} {timing}"]
    return [
        f"{FAILURE_TAGS[outcome.kind]} {outcome.message}",
        f"{TAG_FAILED} {timing}",
    ]


def format_summary(stats: RunStatistics) -> list[str]:
    """Tear-down and aggregate summary lines."""
    lines = [
        f"{TAG_SEPARATOR} Global test environment tear-down",
        f"{TAG_BANNER} {format_tests_and_suites(stats.total_cases, stats.total_suites)} "
        f"ran. ({stats.total_duration_ms} ms total)",
        f"{TAG_PASSED} {pluralize(stats.passed, 'test')}.",
    ]
    if stats.failed_names:
        lines.append(f"{TAG_FAILED} {pluralize(stats.failed, 'test')}, listed below:")
        lines.extend(f"{TAG_FAILED} {name}" for name in stats.failed_names)
        lines.append("")
        lines.append(f" {stats.failed} FAILED {'TEST' if stats.failed == 1 else 'TESTS'}")
    return lines


# ---------------------------------------------------------------------------
# Reporter
# ---------------------------------------------------------------------------


class ConsoleReporter(Reporter):
    """Reporter writing GTest-formatted lines to a text stream.

    Args:
        stream: Destination stream; defaults to Click's stdout at write time.
        color: ``True`` forces ANSI colour, ``False`` disables it and ``None``
            lets Click decide from the stream (colour only on a TTY).
    """

    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self._color = color

    def _emit(self, line: str) -> None:
        for tag, fg in _TAG_COLORS.items():
            if line.startswith(tag):
                line = click.style(tag, fg=fg, bold=True) + line[len(tag) :]
                break
        else:
            if line.startswith((TAG_BANNER, TAG_SEPARATOR, TAG_RUN)):
                line = click.style(line[:12], fg="green") + line[12:]
        click.echo(line, file=self._stream, color=self._color)

    def run_started(self, total_cases: int, total_suites: int) -> None:
        for line in format_run_header(total_cases, total_suites):
            self._emit(line)

    def suite_started(self, suite_name: str, case_count: int) -> None:
        self._emit(format_suite_header(suite_name, case_count))

    def case_started(self, case: TestCase) -> None:
        self._emit(f"{TAG_RUN} {case.qualified_name}")

    def case_finished(self, case: TestCase, outcome: CaseOutcome) -> None:
        for line in format_case_result(case, outcome):
            self._emit(line)

    def suite_finished(self, suite_name: str, case_count: int, duration_ms: int) -> None:
        self._emit(format_suite_footer(suite_name, case_count, duration_ms))
        self._emit("")

    def run_finished(self, stats: RunStatistics) -> None:
        for line in format_summary(stats):
            self._emit(line)
