"""Registry of test suites and their cases.

Cases are registered as a side effect of importing a test module, through the
`define_test` decorator. The registry keeps suites in the order they were
first seen and cases in declaration order; nothing is ever removed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from .errors import InvalidTestNameError
from .value_objects import TestCase

logger = logging.getLogger(__name__)

Body = TypeVar("Body", bound=Callable[[], object])

SuiteSnapshot = list[tuple[str, tuple[TestCase, ...]]]


class Registry:
    """Ordered mapping of suite name to test cases.

    A second registration under an existing suite name appends to that
    suite. Case names are not checked for uniqueness, so duplicates run
    twice.
    """

    def __init__(self) -> None:
        self._suites: dict[str, list[TestCase]] = {}

    def register(
        self, suite_name: str, case_name: str, body: Callable[[], object]
    ) -> TestCase:
        """Append a case to *suite_name*, creating the suite if needed.

        Args:
            suite_name: Name of the suite the case belongs to.
            case_name: Name of the case within its suite.
            body: Zero-argument callable executed by the runner.

        Returns:
            The registered TestCase.

        Raises:
            InvalidTestNameError: If either name is empty.
        """
        if not suite_name or not case_name:
            raise InvalidTestNameError(suite_name, case_name)
        case = TestCase(suite=suite_name, name=case_name, body=body)
        self._suites.setdefault(suite_name, []).append(case)
        logger.debug("Registered test case %s", case.qualified_name)
        return case

    def define_test(self, suite_name: str, case_name: str) -> Callable[[Body], Body]:
        """Decorator form of `register`; the function is returned unchanged."""

        def decorator(body: Body) -> Body:
            self.register(suite_name, case_name, body)
            return body

        return decorator

    def all_suites(self) -> SuiteSnapshot:
        """Return a read-only snapshot of the suites in insertion order."""
        return [(name, tuple(cases)) for name, cases in self._suites.items()]

    @property
    def total_suites(self) -> int:
        """Number of distinct suites."""
        return len(self._suites)

    def __len__(self) -> int:
        return sum(len(cases) for cases in self._suites.values())

    def __repr__(self) -> str:
        return f"Registry(suites={self.total_suites}, cases={len(self)})"


_DEFAULT_REGISTRY = Registry()


def default_registry() -> Registry:
    """Return the process-wide registry used by `define_test`."""
    return _DEFAULT_REGISTRY


def define_test(suite_name: str, case_name: str) -> Callable[[Body], Body]:
    """Register the decorated function as *suite_name*.*case_name*.

    Example:
        ```py
        @define_test("Math", "Addition")
        def _():
            assert_eq(1 + 1, 2)
        ```
    """
    return _DEFAULT_REGISTRY.define_test(suite_name, case_name)
