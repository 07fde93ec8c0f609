"""Unconditional control checks."""

from typing import NoReturn

from vctest.domain.errors import CaseSucceeded

from .primitives import FATAL, NON_FATAL, fail_check


def assert_fail(msg: object = "") -> NoReturn:
    """Fail the case and abort the run."""
    fail_check(FATAL, f"Assert fail, msg: {msg}")


def expect_fail(msg: object = "") -> NoReturn:
    """Fail the case; the run goes on."""
    fail_check(NON_FATAL, f"Expect fail, msg: {msg}")


def succeed() -> NoReturn:
    """Leave the case body immediately, recording it as passed."""
    raise CaseSucceeded()
