"""Closing status line of ``vctest run``.

After the report, the run command prints one line summarising the outcome:
every case passed, some did not, or nothing was registered at all. The line
goes to **stderr** so stdout holds nothing but the GTest-style report, and it
starts with a marker: an emoji when stderr can encode it, an ASCII stand-in
otherwise.
"""

from enum import Enum

import click


class RunStatus(Enum):
    """Outcome of a run, with its marker and colour."""

    PASSED = ("✅", "[OK]", "green")
    FAILED = ("❌", "[X]", "red")
    EMPTY = ("⚠️", "[!]", "yellow")

    def __init__(self, emoji: str, ascii_marker: str, color: str) -> None:
        self.emoji = emoji
        self.ascii_marker = ascii_marker
        self.color = color

    @property
    def marker(self) -> str:
        """The emoji when stderr can encode it, the ASCII marker otherwise."""
        return self.emoji if stderr_can_encode(self.emoji) else self.ascii_marker


def stderr_can_encode(text: str) -> bool:
    """Return True if the current stderr stream can encode *text*."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        text.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def run_status(result: int, total_cases: int) -> RunStatus:
    """Classify a run from the runner's result and its case count."""
    if total_cases == 0:
        return RunStatus.EMPTY
    return RunStatus.PASSED if result == 0 else RunStatus.FAILED


def status_text(status: RunStatus, result: int, passed: int) -> str:
    """Sentence shown after the marker, e.g. ``All 12 test(s) passed.``"""
    if status is RunStatus.EMPTY:
        return "No tests were registered."
    if status is RunStatus.PASSED:
        return f"All {passed} test(s) passed."
    return f"{result} test(s) did not pass."


def report_status(result: int, total_cases: int, passed: int) -> RunStatus:
    """Print the bold, coloured status line for a finished run to stderr.

    Args:
        result: Value returned by the runner (0 when everything passed).
        total_cases: Number of cases the runner found.
        passed: Number of cases that passed.

    Returns:
        The status that was printed.
    """
    status = run_status(result, total_cases)
    click.secho(
        f"{status.marker}  {status_text(status, result, passed)}",
        fg=status.color,
        bold=True,
        err=True,
    )
    return status
