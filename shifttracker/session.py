# shifttracker/session.py
"""
Timer/state controller for one shift.

Phases:
    IDLE           no segment clock, nothing pending
    AWAITING_TASK  the task selector is open
    RUNNING        a segment clock is running under ``selected_task``

``end_segment_and_continue`` closes the running segment and starts the next
segment's clock straight away, then asks for the next task. While that question
is open the new segment already counts under the previous label; picking a task
restarts it at the moment of the pick, so the gap before the pick is not logged.
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from kivy.logger import Logger

from shifttracker.errors import InvalidTransition
from shifttracker.formatting import format_time
from shifttracker.models import SessionPhase, ShiftRecord, TaskCategory
from shifttracker.ticker import Ticker


class ShiftSession:
    def __init__(self, now: Callable[[], datetime] = None, schedule_interval=None, strict: bool = False):
        self._now = now or datetime.now
        self.strict = strict

        self._shifts: List[ShiftRecord] = []
        self.active_start: Optional[datetime] = None
        self.elapsed_seconds = 0
        self.pending_task_selection = False
        self.selected_task: Optional[TaskCategory] = None

        self._listeners: List[Callable[["ShiftSession"], None]] = []
        self.ticker = Ticker(self.tick, schedule_interval=schedule_interval)

    # ----- State -----
    @property
    def phase(self) -> SessionPhase:
        if self.pending_task_selection:
            return SessionPhase.AWAITING_TASK
        if self.active_start is not None:
            return SessionPhase.RUNNING
        return SessionPhase.IDLE

    @property
    def timing(self) -> bool:
        """True while a segment clock runs, including the gap before the next task is picked."""
        return self.active_start is not None

    @property
    def shifts(self) -> Tuple[ShiftRecord, ...]:
        return tuple(self._shifts)

    @property
    def total_seconds(self) -> int:
        return sum(r.seconds for r in self._shifts)

    @property
    def elapsed_display(self) -> str:
        return format_time(self.elapsed_seconds)

    # ----- Listeners -----
    def add_listener(self, fn: Callable[["ShiftSession"], None]) -> None:
        self._listeners.append(fn)

    def remove_listener(self, fn: Callable[["ShiftSession"], None]) -> None:
        if fn in self._listeners:
            self._listeners.remove(fn)

    def _notify(self) -> None:
        for fn in list(self._listeners):
            fn(self)

    def _reject(self, operation: str) -> bool:
        phase = self.phase
        Logger.warning(f"ShiftTracker: ignored {operation} while {phase.value}")
        if self.strict:
            raise InvalidTransition(operation, phase)
        return False

    # ----- Public API -----
    def request_start(self) -> bool:
        """Open the task selector. The clock starts only once a task is confirmed."""
        if self.timing:
            return self._reject("request_start")
        self.pending_task_selection = True
        self._notify()
        return True

    def confirm_task(self, task) -> bool:
        task = TaskCategory.parse(task)
        if not self.pending_task_selection:
            return self._reject("confirm_task")

        self.selected_task = task
        self.pending_task_selection = False
        self.active_start = self._now()
        self.elapsed_seconds = 0
        self.ticker.restart()
        Logger.info(f"ShiftTracker: segment started at {self.active_start.isoformat()} as {task.value}")
        self._notify()
        return True

    def dismiss_task_selection(self) -> bool:
        """Close the selector without choosing. Nothing is recorded."""
        if not self.pending_task_selection:
            return False
        self.pending_task_selection = False
        self._notify()
        return True

    def tick(self, dt=None) -> bool:
        if not self.timing:
            return False
        self.elapsed_seconds += 1
        self._notify()
        return True

    def end_segment_and_continue(self) -> bool:
        if not self.timing:
            return self._reject("end_segment_and_continue")

        now = self._now()
        self._close_segment(now)
        self.active_start = now
        self.elapsed_seconds = 0
        self.pending_task_selection = True
        self.ticker.restart()
        self._notify()
        return True

    def end_shift(self) -> bool:
        if not self.timing:
            return self._reject("end_shift")

        self._close_segment(self._now())
        self.ticker.stop()
        self.active_start = None
        self.elapsed_seconds = 0
        self.selected_task = None
        self.pending_task_selection = False
        Logger.info(f"ShiftTracker: shift ended with {len(self._shifts)} segment(s)")
        self._notify()
        return True

    # ----- Internals -----
    def _close_segment(self, end: datetime) -> ShiftRecord:
        record = ShiftRecord(start=self.active_start, end=end, task=self.selected_task)
        self._shifts.append(record)
        Logger.info(
            f"ShiftTracker: logged {record.task.value} {record.start_time}-{record.end_time} ({record.duration})"
        )
        return record
