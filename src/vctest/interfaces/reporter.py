"""Interface for run reporters."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vctest.domain.value_objects import CaseOutcome, RunStatistics, TestCase


class Reporter(abc.ABC):
    """Contract for a reporter driven by the runner.

    The runner calls the hooks in a fixed order:
    ``run_started`` then, per non-empty suite, ``suite_started``, pairs of
    ``case_started``/``case_finished`` and ``suite_finished``; finally
    ``run_finished``. After a fatal outcome no further hook is called.
    """

    @abc.abstractmethod
    def run_started(self, total_cases: int, total_suites: int) -> None:
        """Called once before the first suite."""

    @abc.abstractmethod
    def suite_started(self, suite_name: str, case_count: int) -> None:
        """Called before the first case of a suite."""

    @abc.abstractmethod
    def case_started(self, case: TestCase) -> None:
        """Called right before a case body is invoked."""

    @abc.abstractmethod
    def case_finished(self, case: TestCase, outcome: CaseOutcome) -> None:
        """Called with the outcome of a case body."""

    @abc.abstractmethod
    def suite_finished(self, suite_name: str, case_count: int, duration_ms: int) -> None:
        """Called after the last case of a suite."""

    @abc.abstractmethod
    def run_finished(self, stats: RunStatistics) -> None:
        """Called once after all suites ran without a fatal abort."""
