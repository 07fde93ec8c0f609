"""Predicate checks of arity one and two."""

from __future__ import annotations

from collections.abc import Callable

from vctest.domain.value_objects import SignalKind

from .primitives import FATAL, NON_FATAL, check
from .source import describe


def _name(kind: SignalKind, arity: int) -> str:
    return f"{'assert' if kind is FATAL else 'expect'}_pred{arity}"


def _pred1(kind: SignalKind, pred: Callable[[object], object], val1: object) -> None:
    def message() -> str:
        text_pred, text1 = describe(_name(kind, 1), pred, val1)
        return f"{text_pred}({text1}) failed"

    check(kind, lambda: pred(val1), message)


def _pred2(
    kind: SignalKind,
    pred: Callable[[object, object], object],
    val1: object,
    val2: object,
) -> None:
    def message() -> str:
        text_pred, text1, text2 = describe(_name(kind, 2), pred, val1, val2)
        return f"{text_pred}({text1}, {text2}) failed"

    check(kind, lambda: pred(val1, val2), message)


def expect_pred1(pred: Callable[[object], object], val1: object) -> None:
    """Non-fatal: ``pred(val1)`` is truthy."""
    _pred1(NON_FATAL, pred, val1)


def expect_pred2(pred: Callable[[object, object], object], val1: object, val2: object) -> None:
    """Non-fatal: ``pred(val1, val2)`` is truthy."""
    _pred2(NON_FATAL, pred, val1, val2)


def assert_pred1(pred: Callable[[object], object], val1: object) -> None:
    """Fatal: ``pred(val1)`` is truthy."""
    _pred1(FATAL, pred, val1)


def assert_pred2(pred: Callable[[object, object], object], val1: object, val2: object) -> None:
    """Fatal: ``pred(val1, val2)`` is truthy."""
    _pred2(FATAL, pred, val1, val2)
