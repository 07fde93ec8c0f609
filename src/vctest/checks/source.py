"""Recover the source text of a check's arguments at its call site.

Failure messages quote the expressions the test author wrote, e.g.
``len(items) != 3``. The text is read back from the caller's source file
with `ast`; when the source is unavailable (REPL, ``exec``) callers fall
back to ``repr()`` of the runtime values.
"""

from __future__ import annotations

import ast
import functools
import inspect
import linecache
from types import FrameType

CHECKS_PACKAGE = __name__.rsplit(".", 1)[0]


def _user_frame() -> FrameType | None:
    """Return the innermost frame outside the checks package."""
    frame = inspect.currentframe()
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if module != CHECKS_PACKAGE and not module.startswith(CHECKS_PACKAGE + "."):
            return frame
        frame = frame.f_back
    return None


@functools.lru_cache(maxsize=64)
def _parse(source: str) -> ast.Module | None:
    try:
        return ast.parse(source)
    except (SyntaxError, ValueError):
        return None


def _call_name(node: ast.Call) -> str | None:
    if isinstance(node.func, ast.Name):
        return node.func.id
    if isinstance(node.func, ast.Attribute):
        return node.func.attr
    return None


def _instruction_position(frame: FrameType) -> tuple[int, int] | None:
    """Start (line, column) of the instruction the frame is executing."""
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None:
        return None
    try:
        lineno, _, col, _ = list(positions())[frame.f_lasti // 2]
    except (IndexError, ValueError):
        return None
    if lineno is None or col is None:
        return None
    return lineno, col


def _find_call(tree: ast.Module, frame: FrameType, func_name: str) -> ast.Call | None:
    lineno = frame.f_lineno
    candidates = [
        node
        for node in ast.walk(tree)
        if isinstance(node, ast.Call)
        and _call_name(node) == func_name
        and node.lineno <= lineno <= (node.end_lineno or node.lineno)
    ]
    if not candidates:
        return None
    if (position := _instruction_position(frame)) is not None:
        for node in candidates:
            if (node.lineno, node.col_offset) == position:
                return node
    # innermost call wins when several share the line
    return min(
        candidates,
        key=lambda n: ((n.end_lineno or n.lineno) - n.lineno, -n.col_offset),
    )


def argument_texts(func_name: str, count: int) -> list[str] | None:
    """Return the source text of the first *count* arguments of the call.

    Args:
        func_name: Name of the check function as written by the caller.
        count: Number of positional arguments to recover.

    Returns:
        The argument texts, or None when the call site cannot be read.
    """
    frame = _user_frame()
    try:
        if frame is None:
            return None
        filename = frame.f_code.co_filename
        source = "".join(linecache.getlines(filename, frame.f_globals))
        if not source or (tree := _parse(source)) is None:
            return None
        node = _find_call(tree, frame, func_name)
        if node is None or len(node.args) < count:
            return None
        texts = [ast.get_source_segment(source, arg) for arg in node.args[:count]]
    finally:
        del frame
    if any(text is None for text in texts):
        return None
    return [_single_line(text) for text in texts if text is not None]


def _single_line(text: str) -> str:
    if "\n" not in text:
        return text
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


def fallback_text(value: object) -> str:
    """Text used for *value* when its source is unavailable."""
    if inspect.isroutine(value):
        return getattr(value, "__qualname__", None) or repr(value)
    return repr(value)


def describe(func_name: str, *values: object) -> list[str]:
    """Source texts for *values*, falling back to `fallback_text`."""
    texts = argument_texts(func_name, len(values))
    if texts is None:
        return [fallback_text(value) for value in values]
    return texts
