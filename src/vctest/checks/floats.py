"""Floating-point checks.

Two flavours of equality are offered:

- absolute tolerance: ``|a - b| <= dv`` with a caller-supplied ``dv``
  (`expect_float_eq`, `expect_float_ne` and their assert forms);
- default relative tolerance: ``|a - b| <= 4 * eps * max(|a|, |b|)`` where
  ``eps`` is the machine epsilon of the precision being compared. The
  ``double`` variants use the double-precision epsilon and the ``float``
  variants the single-precision one (taken from numpy). Differences and
  magnitudes are always computed on the Python floats themselves, so values
  beyond the float32 range still compare like any other.
"""

from __future__ import annotations

import sys

import numpy as np

from vctest.domain.value_objects import SignalKind

from .primitives import FATAL, NON_FATAL, check
from .source import describe

ULP_FACTOR = 4
DOUBLE_EPSILON = sys.float_info.epsilon
FLOAT_EPSILON = float(np.finfo(np.float32).eps)


def _within_ulps(val1: float, val2: float, epsilon: float) -> bool:
    tolerance = ULP_FACTOR * epsilon * max(abs(val1), abs(val2))
    return abs(val1 - val2) <= tolerance


def almost_equal_double(val1: float, val2: float) -> bool:
    """Relative comparison at double precision."""
    return _within_ulps(val1, val2, DOUBLE_EPSILON)


def almost_equal_float(val1: float, val2: float) -> bool:
    """Relative comparison with the single-precision epsilon."""
    return _within_ulps(val1, val2, FLOAT_EPSILON)


def _name(kind: SignalKind, suffix: str) -> str:
    return f"{'assert' if kind is FATAL else 'expect'}_{suffix}"


def _within(kind: SignalKind, val1: float, val2: float, dv: float) -> None:
    def message() -> str:
        text1, text2, text_dv = describe(_name(kind, "float_eq"), val1, val2, dv)
        return f"abs( {text1} - {text2} ) > {text_dv}"

    check(kind, lambda: abs(val1 - val2) <= dv, message)


def _outside(kind: SignalKind, val1: float, val2: float, dv: float) -> None:
    def message() -> str:
        text1, text2, text_dv = describe(_name(kind, "float_ne"), val1, val2, dv)
        return f"abs( {text1} - {text2} ) <= {text_dv}"

    check(kind, lambda: abs(val1 - val2) > dv, message)


def _default_eq(kind: SignalKind, suffix: str, val1: float, val2: float) -> None:
    compare = almost_equal_double if suffix.startswith("double") else almost_equal_float

    def message() -> str:
        text1, text2 = describe(_name(kind, suffix), val1, val2)
        return f"Expected: {text1} == {text2}\nActual: {val1!r} vs {val2!r}"

    check(kind, lambda: compare(val1, val2), message)


def expect_float_eq(val1: float, val2: float, dv: float) -> None:
    """Non-fatal: ``|val1 - val2| <= dv``."""
    _within(NON_FATAL, val1, val2, dv)


def expect_float_ne(val1: float, val2: float, dv: float) -> None:
    """Non-fatal: ``|val1 - val2| > dv``."""
    _outside(NON_FATAL, val1, val2, dv)


def expect_double_eq_default(val1: float, val2: float) -> None:
    """Non-fatal: equal within 4 double-precision ULPs (relative)."""
    _default_eq(NON_FATAL, "double_eq_default", val1, val2)


def expect_float_eq_default(val1: float, val2: float) -> None:
    """Non-fatal: equal within 4 single-precision ULPs (relative)."""
    _default_eq(NON_FATAL, "float_eq_default", val1, val2)


def assert_float_eq(val1: float, val2: float, dv: float) -> None:
    """Fatal: ``|val1 - val2| <= dv``."""
    _within(FATAL, val1, val2, dv)


def assert_float_ne(val1: float, val2: float, dv: float) -> None:
    """Fatal: ``|val1 - val2| > dv``."""
    _outside(FATAL, val1, val2, dv)


def assert_double_eq_default(val1: float, val2: float) -> None:
    """Fatal: equal within 4 double-precision ULPs (relative)."""
    _default_eq(FATAL, "double_eq_default", val1, val2)


def assert_float_eq_default(val1: float, val2: float) -> None:
    """Fatal: equal within 4 single-precision ULPs (relative)."""
    _default_eq(FATAL, "float_eq_default", val1, val2)
