"""Unit tests for the fatal/non-fatal control-flow primitives."""

import pytest

from vctest.checks.primitives import check, evaluate, fail_check, guarded, signal_for
from vctest.domain.errors import AssertFailure, ExpectFailure
from vctest.domain.value_objects import SignalKind


@pytest.mark.parametrize(
    ("kind", "signal"),
    [(SignalKind.FATAL, AssertFailure), (SignalKind.NON_FATAL, ExpectFailure)],
)
def test_fail_check_raises_matching_signal(kind, signal):
    """fail_check raises the exception type matching the kind."""
    with pytest.raises(signal, match="^why$"):
        fail_check(kind, "why")


def test_unrecognized_kind_cannot_be_raised():
    """No check raises an UNRECOGNIZED signal."""
    with pytest.raises(ValueError):
        signal_for(SignalKind.UNRECOGNIZED)


def test_check_passes_silently():
    """A truthy condition does nothing and never builds the message."""

    def message():
        raise AssertionError("message built for a passing check")

    check(SignalKind.FATAL, lambda: True, message)


def test_check_failure_uses_message():
    """A falsy condition raises with the built message."""
    with pytest.raises(ExpectFailure, match="^built$"):
        check(SignalKind.NON_FATAL, lambda: 0, lambda: "built")


def test_error_while_evaluating_becomes_signal_of_same_kind():
    """A non-signal error during evaluation becomes the check's own signal."""

    def boom():
        raise KeyError("missing")

    with pytest.raises(AssertFailure) as exc_info:
        check(SignalKind.FATAL, boom, lambda: "unused")
    assert exc_info.value.message == "'missing'"
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_error_without_message_uses_type_name():
    """Errors with an empty str() are described by their type name."""

    def boom():
        raise RuntimeError()

    with pytest.raises(ExpectFailure, match="^RuntimeError$"):
        evaluate(SignalKind.NON_FATAL, boom)


def test_nested_signal_is_converted_to_outer_kind():
    """A nested fatal signal inside an expect evaluation becomes non-fatal."""
    with pytest.raises(ExpectFailure, match="^inner$"):
        with guarded(SignalKind.NON_FATAL):
            raise AssertFailure("inner")


def test_evaluate_returns_value():
    """evaluate returns the condition's result."""
    assert evaluate(SignalKind.FATAL, lambda: 7) == 7


def test_base_exceptions_are_not_converted():
    """KeyboardInterrupt passes through guarded untouched."""
    with pytest.raises(KeyboardInterrupt):
        with guarded(SignalKind.FATAL):
            raise KeyboardInterrupt
