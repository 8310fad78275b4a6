# shifttracker/__init__.py
"""
Single-screen shift logger: start/stop timer, task categories, running log table
and CSV export. Built on Kivy.
"""

import os

# kivy parses sys.argv on import unless told otherwise
os.environ.setdefault("KIVY_NO_ARGS", "1")

from shifttracker.errors import ExportFailure, InvalidTransition, ShiftTrackerError  # noqa: E402
from shifttracker.export import export_filename, export_to_csv, write_export  # noqa: E402
from shifttracker.formatting import format_clock, format_time  # noqa: E402
from shifttracker.models import SessionPhase, ShiftRecord, TaskCategory  # noqa: E402
from shifttracker.session import ShiftSession  # noqa: E402

__version__ = "1.0.0"

__all__ = [
    "ExportFailure",
    "InvalidTransition",
    "SessionPhase",
    "ShiftRecord",
    "ShiftSession",
    "ShiftTrackerError",
    "TaskCategory",
    "export_filename",
    "export_to_csv",
    "format_clock",
    "format_time",
    "write_export",
]
