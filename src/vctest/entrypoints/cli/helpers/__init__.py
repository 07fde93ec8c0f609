"""CLI helpers for VCTEST.

Utilities used by the command-line interface: NAME=LEVEL option parsing and
the closing status line of a run.
"""

from .log_level_parser import parse_log_level
from .messages import RunStatus, report_status

__all__ = ["parse_log_level", "RunStatus", "report_status"]
