"""Load test modules so their registrations run.

Registration happens as a side effect of importing a test module. This
adapter imports what the user points at:

- a dotted module name (``tests.test_math``);
- a path to a ``.py`` file;
- a directory, scanned recursively for files matching a glob pattern
  (``test_*.py`` by default) in sorted order.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType

from vctest.config import DEFAULT_TEST_FILE_PATTERN
from vctest.domain.errors import VctestError

logger = logging.getLogger(__name__)


class DiscoveryError(VctestError):
    """Raised when a test module cannot be located or imported."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Cannot load tests from {target!r}: {reason}")
        self.target = target
        self.reason = reason


def _module_name_for(path: Path) -> str:
    # unique per absolute path so same-named files in different dirs coexist
    digest = hashlib.sha256(str(path).encode("utf-8")).hexdigest()[:12]
    return f"vctest_discovered_{path.stem}_{digest}"


@contextmanager
def _sys_path_entry(directory: Path) -> Iterator[None]:
    """Put *directory* first on ``sys.path`` while the block runs."""
    entry = str(directory)
    added = entry not in sys.path
    if added:
        sys.path.insert(0, entry)
    try:
        yield
    finally:
        if added and entry in sys.path:
            sys.path.remove(entry)


def load_file(path: Path) -> ModuleType:
    """Import a Python source file as a fresh module.

    The file's directory is on ``sys.path`` during the import, so the module
    can import helper modules that sit next to it.

    Raises:
        DiscoveryError: If the file cannot be loaded or raises on import.
    """
    path = path.resolve()
    name = _module_name_for(path)
    if (module := sys.modules.get(name)) is not None:
        return module
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise DiscoveryError(str(path), "not an importable Python file")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        with _sys_path_entry(path.parent):
            spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[name]
        raise DiscoveryError(str(path), f"{type(e).__name__}: {e}") from e
    logger.info("Loaded test file %s", path)
    return module


def load_module(name: str) -> ModuleType:
    """Import a module by dotted name.

    Raises:
        DiscoveryError: If the module is missing or raises on import.
    """
    try:
        module = importlib.import_module(name)
    except ModuleNotFoundError as e:
        raise DiscoveryError(name, "module not found") from e
    except Exception as e:
        raise DiscoveryError(name, f"{type(e).__name__}: {e}") from e
    logger.info("Loaded test module %s", name)
    return module


def find_test_files(directory: Path, pattern: str = DEFAULT_TEST_FILE_PATTERN) -> list[Path]:
    """Return files under *directory* matching *pattern*, sorted."""
    return sorted(p for p in directory.rglob(pattern) if p.is_file())


def load_tests(
    targets: list[str] | tuple[str, ...], pattern: str = DEFAULT_TEST_FILE_PATTERN
) -> list[ModuleType]:
    """Import every target in order and return the loaded modules.

    Args:
        targets: Dotted module names, ``.py`` files or directories.
        pattern: Glob used when a target is a directory.

    Raises:
        DiscoveryError: On the first target that cannot be loaded.
    """
    modules: list[ModuleType] = []
    for target in targets:
        path = Path(target)
        if path.is_dir():
            files = find_test_files(path, pattern)
            if not files:
                logger.warning("No files matching %s under %s", pattern, path)
            modules.extend(load_file(f) for f in files)
        elif path.suffix == ".py":
            if not path.is_file():
                raise DiscoveryError(target, "file does not exist")
            modules.append(load_file(path))
        else:
            modules.append(load_module(target))
    return modules
