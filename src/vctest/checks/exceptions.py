"""Exception expectation checks.

The operation under test is passed as a zero-argument callable, usually a
lambda, and is called exactly once::

    expect_throw(lambda: int("x"), ValueError)
    expect_any_throw(lambda: expect_eq(1, 2))
    expect_no_throw(lambda: parse(text))

Signals raised by nested checks count as thrown exceptions. `succeed` inside
the operation does not: it still ends the case as passed.
"""

from __future__ import annotations

from collections.abc import Callable

from vctest.domain.errors import CaseSucceeded
from vctest.domain.value_objects import SignalKind

from .primitives import FATAL, NON_FATAL, fail_check
from .source import describe

Operation = Callable[[], object]


def _name(kind: SignalKind, suffix: str) -> str:
    return f"{'assert' if kind is FATAL else 'expect'}_{suffix}"


def _throw(
    kind: SignalKind,
    operation: Operation,
    exception: type[BaseException] | tuple[type[BaseException], ...],
) -> None:
    try:
        operation()
    except CaseSucceeded:
        raise
    except exception:
        return
    except Exception:  # pylint: disable=broad-except
        text = describe(_name(kind, "throw"), operation)[0]
        fail_check(kind, f"{text} exception thrown but not match")
    text = describe(_name(kind, "throw"), operation)[0]
    fail_check(kind, f"{text} no exception thrown")


def _any_throw(kind: SignalKind, operation: Operation) -> None:
    try:
        operation()
    except CaseSucceeded:
        raise
    except Exception:  # pylint: disable=broad-except
        return
    text = describe(_name(kind, "any_throw"), operation)[0]
    fail_check(kind, f"{text} no exception thrown")


def _no_throw(kind: SignalKind, operation: Operation) -> None:
    try:
        operation()
    except CaseSucceeded:
        raise
    except Exception:  # pylint: disable=broad-except
        text = describe(_name(kind, "no_throw"), operation)[0]
        fail_check(kind, f"{text} thrown exception")


def expect_throw(
    operation: Operation,
    exception: type[BaseException] | tuple[type[BaseException], ...],
) -> None:
    """Non-fatal: *operation* raises an instance of *exception*."""
    _throw(NON_FATAL, operation, exception)


def expect_any_throw(operation: Operation) -> None:
    """Non-fatal: *operation* raises any exception."""
    _any_throw(NON_FATAL, operation)


def expect_no_throw(operation: Operation) -> None:
    """Non-fatal: *operation* returns without raising."""
    _no_throw(NON_FATAL, operation)


def assert_throw(
    operation: Operation,
    exception: type[BaseException] | tuple[type[BaseException], ...],
) -> None:
    """Fatal: *operation* raises an instance of *exception*."""
    _throw(FATAL, operation, exception)


def assert_any_throw(operation: Operation) -> None:
    """Fatal: *operation* raises any exception."""
    _any_throw(FATAL, operation)


def assert_no_throw(operation: Operation) -> None:
    """Fatal: *operation* returns without raising."""
    _no_throw(FATAL, operation)
