"""Module including value objects used across the domain layer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class SignalKind(Enum):
    """Enumeration of the signals a failing case can produce"""

    FATAL = "fatal"
    NON_FATAL = "non_fatal"
    UNRECOGNIZED = "unrecognized"


class OutcomeKind(Enum):
    """Closed set of results of running one case."""

    PASSED = "passed"
    FATAL = "fatal"
    NON_FATAL = "non_fatal"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_signal(cls, kind: SignalKind) -> OutcomeKind:
        """Map a signal kind to the matching failure outcome."""
        return cls(kind.value)


@dataclass(frozen=True)
class TestCase:
    """Value object representing one registered test case."""

    __test__ = False  # not a pytest class

    suite: str
    name: str
    body: Callable[[], object] = field(compare=False)

    @property
    def qualified_name(self) -> str:
        """Name in `suite.case` form, as listed in failure summaries."""
        return f"{self.suite}.{self.name}"


@dataclass(frozen=True)
class CheckSignal:
    """A tagged failure message recovered at the per-case boundary."""

    kind: SignalKind
    message: str


@dataclass(frozen=True)
class CaseOutcome:
    """Value object describing how a single case ended.

    Attributes:
        kind: The outcome category.
        duration_ms: Wall-clock time of the body, truncated to milliseconds.
        signal: The failure signal, ``None`` for passed cases.
    """

    kind: OutcomeKind
    duration_ms: int
    signal: CheckSignal | None = None

    @property
    def passed(self) -> bool:
        """True when the case passed (including early `succeed()`)."""
        return self.kind is OutcomeKind.PASSED

    @property
    def message(self) -> str:
        """Failure message, empty for passed cases."""
        return self.signal.message if self.signal else ""


@dataclass
class RunStatistics:
    """Counters accumulated by the runner over a single run."""

    total_cases: int = 0
    total_suites: int = 0
    passed: int = 0
    failed_names: list[str] = field(default_factory=list)
    suite_durations: dict[str, int] = field(default_factory=dict)
    total_duration_ms: int = 0

    @property
    def failed(self) -> int:
        """Number of cases recorded in the failure roll-call."""
        return len(self.failed_names)
