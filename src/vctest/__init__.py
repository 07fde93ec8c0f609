"""VCTEST

A small unit-testing framework with GTest-style console output. Test cases
are registered at import time with `define_test` and run in registration
order by `run_all_tests`. Checks come in two strengths: ``assert_*`` checks
abort the whole run on failure, ``expect_*`` checks fail only the current
case.

Example:
    ```py
    from vctest import define_test, expect_eq, run_all_tests

    @define_test("Math", "Addition")
    def _():
        expect_eq(1 + 1, 2)

    raise SystemExit(run_all_tests())
    ```
"""

from .bootstrap import run_all_tests
from .checks import *  # noqa: F401,F403
from .checks import __all__ as _checks_all
from .domain.errors import AssertFailure, CaseSucceeded, CheckFailure, ExpectFailure
from .domain.registry import Registry, default_registry, define_test

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AssertFailure",
    "CaseSucceeded",
    "CheckFailure",
    "ExpectFailure",
    "Registry",
    "default_registry",
    "define_test",
    "run_all_tests",
    *_checks_all,
]
