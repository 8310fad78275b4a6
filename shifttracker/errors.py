# shifttracker/errors.py
import traceback
from datetime import datetime

from kivy.logger import Logger

from shifttracker.config import ERROR_LOG


class ShiftTrackerError(Exception):
    """Base class for everything this app raises on purpose."""


class InvalidTransition(ShiftTrackerError):
    def __init__(self, operation, phase):
        self.operation = operation
        self.phase = phase
        super().__init__(f"{operation} is not allowed while {phase.value}")


class ExportFailure(ShiftTrackerError):
    """Writing or sharing the csv file failed. The session is left untouched."""


def log_error(e: Exception, log_file: str = ERROR_LOG):
    """Append the exception with its traceback to the error log and to the kivy logger."""
    details = "".join(traceback.format_exception(type(e), e, e.__traceback__))
    Logger.error(f"ShiftTracker: {e!r}")
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"{datetime.now().isoformat()} - ERROR:\n")
            f.write(details)
            f.write("\n\n")
    except OSError as write_err:
        Logger.warning(f"ShiftTracker: could not write {log_file}: {write_err}")
