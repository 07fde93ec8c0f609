"""Assertion (fatal) and expectation (non-fatal) checks.

Every ``assert_*`` function raises `AssertFailure` when its condition does
not hold, ending the case and the whole run. Every ``expect_*`` function
raises `ExpectFailure`, ending only the current case.
"""

from .boolean import assert_false, assert_true, expect_false, expect_true
from .comparison import (
    assert_eq,
    assert_ge,
    assert_gt,
    assert_le,
    assert_lt,
    assert_ne,
    expect_eq,
    expect_ge,
    expect_gt,
    expect_le,
    expect_lt,
    expect_ne,
)
from .control import assert_fail, expect_fail, succeed
from .exceptions import (
    assert_any_throw,
    assert_no_throw,
    assert_throw,
    expect_any_throw,
    expect_no_throw,
    expect_throw,
)
from .floats import (
    assert_double_eq_default,
    assert_float_eq,
    assert_float_eq_default,
    assert_float_ne,
    expect_double_eq_default,
    expect_float_eq,
    expect_float_eq_default,
    expect_float_ne,
)
from .predicates import assert_pred1, assert_pred2, expect_pred1, expect_pred2
from .strings import (
    assert_strcaseeq,
    assert_strcasene,
    assert_streq,
    assert_strne,
    expect_strcaseeq,
    expect_strcasene,
    expect_streq,
    expect_strne,
)

__all__ = [
    "assert_any_throw",
    "assert_double_eq_default",
    "assert_eq",
    "assert_fail",
    "assert_false",
    "assert_float_eq",
    "assert_float_eq_default",
    "assert_float_ne",
    "assert_ge",
    "assert_gt",
    "assert_le",
    "assert_lt",
    "assert_ne",
    "assert_no_throw",
    "assert_pred1",
    "assert_pred2",
    "assert_strcaseeq",
    "assert_strcasene",
    "assert_streq",
    "assert_strne",
    "assert_throw",
    "assert_true",
    "expect_any_throw",
    "expect_double_eq_default",
    "expect_eq",
    "expect_fail",
    "expect_false",
    "expect_float_eq",
    "expect_float_eq_default",
    "expect_float_ne",
    "expect_ge",
    "expect_gt",
    "expect_le",
    "expect_lt",
    "expect_ne",
    "expect_no_throw",
    "expect_pred1",
    "expect_pred2",
    "expect_strcaseeq",
    "expect_strcasene",
    "expect_streq",
    "expect_strne",
    "expect_throw",
    "expect_true",
    "succeed",
]
