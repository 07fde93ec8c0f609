"""The two control-flow primitives every check reduces to.

A failing check raises either an `AssertFailure` (fatal) or an
`ExpectFailure` (non-fatal). Both unwind the case body up to the runner's
per-case boundary, so a failing ``expect_*`` check also ends the current
case; only the runner decides whether the run goes on.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import NoReturn, TypeVar

from vctest.domain.errors import AssertFailure, CheckFailure, ExpectFailure
from vctest.domain.value_objects import SignalKind

T = TypeVar("T")

FATAL = SignalKind.FATAL
NON_FATAL = SignalKind.NON_FATAL

_SIGNALS: dict[SignalKind, type[CheckFailure]] = {
    SignalKind.FATAL: AssertFailure,
    SignalKind.NON_FATAL: ExpectFailure,
}


def signal_for(kind: SignalKind) -> type[CheckFailure]:
    """Return the exception type raised for *kind*.

    Raises:
        ValueError: For `SignalKind.UNRECOGNIZED`, which no check raises.
    """
    try:
        return _SIGNALS[kind]
    except KeyError as e:
        raise ValueError(f"Checks cannot raise {kind.name} signals") from e


def fail_check(kind: SignalKind, message: str) -> NoReturn:
    """Raise the signal of *kind* carrying *message*."""
    raise signal_for(kind)(message)


@contextmanager
def guarded(kind: SignalKind) -> Iterator[None]:
    """Convert any error raised while evaluating a condition into *kind*.

    Errors raised by comparison operators, predicates or conversions
    become a signal of the check's own kind carrying the original message,
    including signals raised by nested checks.
    """
    try:
        yield
    except CheckFailure as e:
        raise signal_for(kind)(e.message) from e
    except Exception as e:  # pylint: disable=broad-except
        raise signal_for(kind)(str(e) or type(e).__name__) from e


def evaluate(kind: SignalKind, condition: Callable[[], T]) -> T:
    """Evaluate *condition* under `guarded` and return its result."""
    with guarded(kind):
        return condition()


def check(
    kind: SignalKind, condition: Callable[[], object], message: Callable[[], str]
) -> None:
    """Raise a *kind* signal unless *condition* is truthy.

    Args:
        kind: Signal raised on failure.
        condition: Zero-argument callable evaluated under `guarded`.
        message: Builds the failure message; only called when the check fails.
    """
    if not evaluate(kind, lambda: bool(condition())):
        fail_check(kind, message())
