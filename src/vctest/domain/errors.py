"""Domain-layer error and signal definitions."""

from .value_objects import SignalKind

# ============================================================================
#                           General framework errors
# ============================================================================


class VctestError(Exception):
    """Base class for framework errors (never raised by a check)."""


class InvalidTestNameError(VctestError, ValueError):
    """Raised when a suite or case is registered with an empty name."""

    def __init__(self, suite_name: str, case_name: str) -> None:
        super().__init__(
            f"Suite and case names must be non-empty, got {suite_name!r}.{case_name!r}."
        )
        self.suite_name = suite_name
        self.case_name = case_name


# ============================================================================
#                           Check signals
# ============================================================================


class CheckFailure(Exception):
    """Base class for the signals raised by a failing check.

    Signals unwind the case body up to the runner's per-case boundary, which
    is the only place they are caught.
    """

    kind: SignalKind = SignalKind.UNRECOGNIZED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AssertFailure(CheckFailure):
    """Fatal signal: ends the current case and aborts the whole run."""

    kind = SignalKind.FATAL


class ExpectFailure(CheckFailure):
    """Non-fatal signal: ends the current case, the run goes on."""

    kind = SignalKind.NON_FATAL


class CaseSucceeded(Exception):
    """Raised by `succeed()` to leave a case body early as a pass."""
