"""Logging setup for the vctest CLI.

``vctest`` logs to two sinks, both configured from its top-level options:

- the console: a Rich handler on stderr whose threshold starts at WARNING and
  moves one level per ``-v`` (down) or ``-q`` (up);
- the flight recorder: an optional in-memory buffer holding every record at
  DEBUG granularity, written to a file once a WARNING is logged (a run
  aborted by a fatal check logs one) or on exit when forced.

The test report never goes through logging; the console reporter prints it
to stdout. Records logged by test bodies and by the libraries they use
reach the same sinks as vctest's own, with the top-level package of foreign
loggers shown in brackets.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import ModuleType

    from vctest.domain.registry import Registry

PROJECT_PREFIX = "vctest"
DEFAULT_RECORDER_CAPACITY = 2000

CONSOLE_FORMAT = "%(origin)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Console threshold for *verbose* ``-v`` and *quiet* ``-q`` flags."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def record_origin(logger_name: str) -> str:
    """``"[pkg]"`` for a logger outside vctest, ``""`` for vctest's own."""
    if logger_name == PROJECT_PREFIX or logger_name.startswith(f"{PROJECT_PREFIX}."):
        return ""
    return f"[{logger_name.partition('.')[0]}]"


class OriginFilter(logging.Filter):
    """Set ``record.origin`` for `CONSOLE_FORMAT`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.origin = record_origin(record.name)
        return True


@dataclass(frozen=True)
class LogSettings:
    """Logging choices made on the command line.

    Attributes:
        level: Console threshold (see `verbosity_level`).
        debug: Show every record on the console with time, logger and source
            location.
        recorder_path: Flight-recorder file; ``None`` disables the recorder.
        recorder_capacity: Number of records the recorder keeps in memory.
        force_flush: Write the recorder buffer on exit even without a WARNING.
        logger_levels: Minimum level per logger name, from ``-L NAME=LEVEL``.
    """

    level: int = logging.WARNING
    debug: bool = False
    recorder_path: Path | None = None
    recorder_capacity: int = DEFAULT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def console_handler(level: int, *, debug: bool = False, color: bool = True) -> RichHandler:
    """Rich handler on stderr.

    In debug mode the handler passes DEBUG records and shows timestamps,
    logger names and source paths; otherwise it passes *level* and above and
    shows the origin of foreign records.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(OriginFilter())
    return handler


def flight_recorder(
    path: Path, *, capacity: int = DEFAULT_RECORDER_CAPACITY, force_flush: bool = False
) -> MemoryHandler:
    """Memory buffer of up to *capacity* records, written to *path* on WARNING.

    The file is opened on the first write, so a run that never flushes
    leaves no file behind.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=force_flush,
    )


def configure(settings: LogSettings, *, color: bool = True) -> list[logging.Handler]:
    """Install the console handler (and the recorder) on the root logger.

    The root logger passes every record; each handler applies its own
    threshold. Per-logger levels from *settings* are applied last.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        console_handler(settings.level, debug=settings.debug, color=color)
    ]
    if settings.recorder_path is not None:
        handlers.append(
            flight_recorder(
                settings.recorder_path,
                capacity=settings.recorder_capacity,
                force_flush=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(logger: logging.Logger, app_version: str, settings: LogSettings) -> None:
    """One INFO summary of the logging setup, details at DEBUG."""
    logger.info(
        "VCTEST %s - console=%s, flight-recorder=%s",
        app_version,
        "DEBUG (debug mode)" if settings.debug else logging.getLevelName(settings.level),
        settings.recorder_path or "OFF",
    )
    logger.debug("Python %s on %s", platform.python_version(), platform.platform(terse=True))
    if settings.recorder_path is not None:
        logger.debug(
            "Flight recorder keeps %d record(s), force flush %s",
            settings.recorder_capacity,
            "on" if settings.force_flush else "off",
        )
    for name, level in sorted(settings.logger_levels.items()):
        logger.debug("Logger %s at %s", name, logging.getLevelName(level))


def log_loaded_tests(
    logger: logging.Logger,
    targets: Sequence[str],
    pattern: str,
    modules: Sequence[ModuleType],
    registry: Registry,
) -> None:
    """Report what discovery imported and what the registry now holds."""
    logger.info(
        "Loaded %d module(s) from %s: %d case(s) in %d suite(s)",
        len(modules),
        ", ".join(targets),
        len(registry),
        registry.total_suites,
    )
    logger.debug("Directory targets scanned for %s", pattern)
    for module in modules:
        logger.debug("Module %s (%s)", module.__name__, getattr(module, "__file__", None))
