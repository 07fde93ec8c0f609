"""Boolean checks."""

from vctest.domain.value_objects import SignalKind

from .primitives import FATAL, NON_FATAL, check
from .source import describe


def _true(kind: SignalKind, name: str, condition: object) -> None:
    check(kind, lambda: condition, lambda: f"{describe(name, condition)[0]} return false")


def _false(kind: SignalKind, name: str, condition: object) -> None:
    check(
        kind, lambda: not condition, lambda: f"{describe(name, condition)[0]} return true"
    )


def expect_true(condition: object) -> None:
    """Non-fatal: *condition* must be truthy."""
    _true(NON_FATAL, "expect_true", condition)


def expect_false(condition: object) -> None:
    """Non-fatal: *condition* must be falsy."""
    _false(NON_FATAL, "expect_false", condition)


def assert_true(condition: object) -> None:
    """Fatal: *condition* must be truthy."""
    _true(FATAL, "assert_true", condition)


def assert_false(condition: object) -> None:
    """Fatal: *condition* must be falsy."""
    _false(FATAL, "assert_false", condition)
