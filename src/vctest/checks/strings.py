"""String equality checks.

The case-insensitive variants fold both operands with an ASCII-only
lowercase mapping, so the result never depends on the locale or on Unicode
case rules (``"É"`` and ``"é"`` stay different).
"""

from __future__ import annotations

import string

from vctest.domain.value_objects import SignalKind

from .primitives import FATAL, NON_FATAL, check, evaluate
from .source import describe

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only."""
    return text.translate(_ASCII_LOWER)


def _name(kind: SignalKind, suffix: str) -> str:
    return f"{'assert' if kind is FATAL else 'expect'}_{suffix}"


def _strings(kind: SignalKind, str1: object, str2: object) -> tuple[str, str]:
    return evaluate(kind, lambda: (str(str1), str(str2)))


def _equal(kind: SignalKind, str1: object, str2: object, ignore_case: bool) -> None:
    s1, s2 = _strings(kind, str1, str2)
    suffix = "strcaseeq" if ignore_case else "streq"
    note = " (ignoring case)" if ignore_case else ""

    def message() -> str:
        text1, text2 = describe(_name(kind, suffix), str1, str2)
        return f'Expected: {text1} == {text2}{note}\nActual: "{s1}" vs "{s2}"'

    if ignore_case:
        check(kind, lambda: ascii_lower(s1) == ascii_lower(s2), message)
    else:
        check(kind, lambda: s1 == s2, message)


def _not_equal(kind: SignalKind, str1: object, str2: object, ignore_case: bool) -> None:
    s1, s2 = _strings(kind, str1, str2)
    suffix = "strcasene" if ignore_case else "strne"
    note = " (ignoring case)" if ignore_case else ""

    def message() -> str:
        text1, text2 = describe(_name(kind, suffix), str1, str2)
        return f'Expected: {text1} != {text2}{note}\nActual: both are "{s1}"'

    if ignore_case:
        check(kind, lambda: ascii_lower(s1) != ascii_lower(s2), message)
    else:
        check(kind, lambda: s1 != s2, message)


def expect_streq(str1: object, str2: object) -> None:
    """Non-fatal: strings are equal."""
    _equal(NON_FATAL, str1, str2, ignore_case=False)


def expect_strne(str1: object, str2: object) -> None:
    """Non-fatal: strings differ."""
    _not_equal(NON_FATAL, str1, str2, ignore_case=False)


def expect_strcaseeq(str1: object, str2: object) -> None:
    """Non-fatal: strings are equal ignoring ASCII case."""
    _equal(NON_FATAL, str1, str2, ignore_case=True)


def expect_strcasene(str1: object, str2: object) -> None:
    """Non-fatal: strings differ even ignoring ASCII case."""
    _not_equal(NON_FATAL, str1, str2, ignore_case=True)


def assert_streq(str1: object, str2: object) -> None:
    """Fatal: strings are equal."""
    _equal(FATAL, str1, str2, ignore_case=False)


def assert_strne(str1: object, str2: object) -> None:
    """Fatal: strings differ."""
    _not_equal(FATAL, str1, str2, ignore_case=False)


def assert_strcaseeq(str1: object, str2: object) -> None:
    """Fatal: strings are equal ignoring ASCII case."""
    _equal(FATAL, str1, str2, ignore_case=True)


def assert_strcasene(str1: object, str2: object) -> None:
    """Fatal: strings differ even ignoring ASCII case."""
    _not_equal(FATAL, str1, str2, ignore_case=True)
