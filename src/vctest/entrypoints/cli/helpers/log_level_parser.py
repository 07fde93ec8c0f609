"""Parsing of ``-L NAME=LEVEL`` / ``VCTEST_LOGGER_LEVEL`` values.

Test bodies often drive third-party libraries whose loggers are chatty at
DEBUG; this option lets a run quiet (or open up) individual loggers without
touching the global ``-v``/``-q`` verbosity.

Accepted forms, repeatable or comma/space separated::

    -L asyncio=INFO
    -L vctest.service_layer=debug,urllib3=40
"""

import logging
import re

import click

# asyncio logs selector details at DEBUG when test bodies use event loops
DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_pairs(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten one string or a sequence of strings into NAME=LEVEL items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def level_from_text(text: str) -> int:
    """Return the numeric level for a level name (any case) or an integer.

    Raises:
        click.BadParameter: If *text* names no standard level.
    """
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelNamesMapping().get(text.upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a logger-name -> level dict.

    The result starts from `DEFAULT_LIB_LEVELS`; later items override earlier
    ones for the same logger.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_pairs(value or ()):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = level_from_text(level_text)
    return levels
