"""Configuration utilities for VCTEST.

This module centralizes small helpers and constants related to configuration.
"""

import os
import re
from pathlib import Path

from platformdirs import user_log_dir

from vctest.domain.errors import VctestError

PATHS_ENV_VAR = "VCTEST_PATHS"
DEFAULT_TEST_FILE_PATTERN = "test_*.py"
APP_NAME = "vctest"


class TestPathsNotSetError(VctestError):
    """Raised when the VCTEST_PATHS environment variable is not set."""

    __test__ = False  # not a pytest class

    def __init__(self) -> None:
        super().__init__(f"{PATHS_ENV_VAR} is not set.")


def get_test_paths() -> list[str]:
    """Get the test modules/paths to load from the environment.

    Entries are separated by the platform path separator or commas.

    Returns:
        The non-empty entries of `VCTEST_PATHS`, in order.

    Raises:
        TestPathsNotSetError: If `VCTEST_PATHS` is unset or holds no entry.
    """
    raw = os.environ.get(PATHS_ENV_VAR, "")
    separators = re.escape(os.pathsep) + ","
    if not (paths := [p.strip() for p in re.split(f"[{separators}]", raw) if p.strip()]):
        raise TestPathsNotSetError
    return paths


def default_log_path() -> Path:
    """Default flight-recorder file, under the user's log directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"
