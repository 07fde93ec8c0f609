"""Equality and ordering checks.

Each check uses the operands' own comparison operators. On failure the
message states the violated relation with the operator inverted, e.g.
``count != 3``, followed by the runtime values.
"""

import operator
from collections.abc import Callable

from vctest.domain.value_objects import SignalKind

from .primitives import FATAL, NON_FATAL, check
from .source import describe

# relation -> (operator, symbol shown when it does not hold)
_RELATIONS: dict[str, tuple[Callable[[object, object], object], str]] = {
    "eq": (operator.eq, "!="),
    "ne": (operator.ne, "=="),
    "lt": (operator.lt, ">="),
    "le": (operator.le, ">"),
    "gt": (operator.gt, "<="),
    "ge": (operator.ge, "<"),
}


def _compare(kind: SignalKind, relation: str, val1: object, val2: object) -> None:
    op, inverse = _RELATIONS[relation]
    name = f"{'assert' if kind is FATAL else 'expect'}_{relation}"

    def message() -> str:
        text1, text2 = describe(name, val1, val2)
        return f"{text1} {inverse} {text2}\nActual: {val1!r} vs {val2!r}"

    check(kind, lambda: op(val1, val2), message)


def expect_eq(val1: object, val2: object) -> None:
    """Non-fatal: ``val1 == val2``."""
    _compare(NON_FATAL, "eq", val1, val2)


def expect_ne(val1: object, val2: object) -> None:
    """Non-fatal: ``val1 != val2``."""
    _compare(NON_FATAL, "ne", val1, val2)


def expect_lt(val1: object, val2: object) -> None:
    """Non-fatal: ``val1 < val2``."""
    _compare(NON_FATAL, "lt", val1, val2)


def expect_le(val1: object, val2: object) -> None:
    """Non-fatal: ``val1 <= val2``."""
    _compare(NON_FATAL, "le", val1, val2)


def expect_gt(val1: object, val2: object) -> None:
    """Non-fatal: ``val1 > val2``."""
    _compare(NON_FATAL, "gt", val1, val2)


def expect_ge(val1: object, val2: object) -> None:
    """Non-fatal: ``val1 >= val2``."""
    _compare(NON_FATAL, "ge", val1, val2)


def assert_eq(val1: object, val2: object) -> None:
    """Fatal: ``val1 == val2``."""
    _compare(FATAL, "eq", val1, val2)


def assert_ne(val1: object, val2: object) -> None:
    """Fatal: ``val1 != val2``."""
    _compare(FATAL, "ne", val1, val2)


def assert_lt(val1: object, val2: object) -> None:
    """Fatal: ``val1 < val2``."""
    _compare(FATAL, "lt", val1, val2)


def assert_le(val1: object, val2: object) -> None:
    """Fatal: ``val1 <= val2``."""
    _compare(FATAL, "le", val1, val2)


def assert_gt(val1: object, val2: object) -> None:
    """Fatal: ``val1 > val2``."""
    _compare(FATAL, "gt", val1, val2)


def assert_ge(val1: object, val2: object) -> None:
    """Fatal: ``val1 >= val2``."""
    _compare(FATAL, "ge", val1, val2)
