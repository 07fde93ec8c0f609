"""Fixtures for end-to-end CLI tests.

Test modules are written into an isolated filesystem and loaded by the real
``vctest run`` command; the process-wide registry is swapped for an empty
one so registrations never leak between tests.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers.sample_modules import FAILING_MODULE, PASSING_MODULE, write_module

# pylint: disable=redefined-outer-name,unused-argument


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner, fresh_default_registry):
    """Isolated filesystem with an empty process-wide registry."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def passing_tests(fs) -> Path:
    """A tests directory whose cases all pass."""
    write_module("suite/test_math.py", PASSING_MODULE)
    return Path("suite")


@pytest.fixture
def failing_tests(fs) -> Path:
    """A tests directory with one passing and one failing case."""
    write_module("suite/test_text.py", FAILING_MODULE)
    return Path("suite")
