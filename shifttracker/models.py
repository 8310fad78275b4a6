# shifttracker/models.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from shifttracker.config import CSV_FIELDS
from shifttracker.formatting import format_clock, format_time


class TaskCategory(Enum):
    CLINICAL = "Clinical"
    NON_CLINICAL = "Non-Clinical"
    BILLABLE = "Billable"
    NON_BILLABLE = "Non-Billable"
    EDUCATION = "Education"
    BREAK = "Break"

    @classmethod
    def parse(cls, value) -> "TaskCategory":
        """Accept a member or its exact label. Anything else is a ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            labels = ", ".join(t.value for t in cls)
            raise ValueError(f"unknown task {value!r}, expected one of: {labels}") from None

    def __str__(self):
        return self.value


class SessionPhase(Enum):
    IDLE = "idle"
    AWAITING_TASK = "awaiting task"
    RUNNING = "running"


@dataclass(frozen=True)
class ShiftRecord:
    """One completed segment. Created once, never edited."""
    start: datetime
    end: datetime
    task: TaskCategory

    @property
    def seconds(self) -> int:
        return int((self.end - self.start).total_seconds())

    @property
    def start_time(self) -> str:
        return format_clock(self.start)

    @property
    def end_time(self) -> str:
        return format_clock(self.end)

    @property
    def duration(self) -> str:
        return format_time(self.seconds)

    def as_row(self) -> dict:
        values = (self.start_time, self.end_time, self.duration, self.task.value)
        return dict(zip(CSV_FIELDS, values))
