"""Global pytest fixtures for VCTEST."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers.fakes import FakeClock, RecordingReporter
from vctest.domain import registry as registry_module
from vctest.domain.registry import Registry

# pylint: disable=redefined-outer-name

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark each item with the name of its top-level folder (unit, integration, e2e)."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except (ValueError, IndexError):
            continue
        if folder in FOLDER_MARKERS and not any(
            marker.name == folder for marker in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture
def registry() -> Registry:
    """A fresh, empty registry."""
    return Registry()


@pytest.fixture
def reporter() -> RecordingReporter:
    """A reporter recording every runner event."""
    return RecordingReporter()


@pytest.fixture
def clock() -> FakeClock:
    """A clock advancing 1 ms per read."""
    return FakeClock()


@pytest.fixture
def fresh_default_registry(monkeypatch: pytest.MonkeyPatch) -> Registry:
    """Swap the process-wide registry for an empty one during a test.

    `define_test` and `default_registry()` both read the module global at
    call time, so patching it isolates tests that import test modules.
    """
    fresh = Registry()
    monkeypatch.setattr(registry_module, "_DEFAULT_REGISTRY", fresh)
    return fresh
