# shifttracker/screen.py
"""
What the single screen should show for a given session, kept apart from the
widgets so it can be checked without a window.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from shifttracker.formatting import format_time
from shifttracker.models import TaskCategory

START_BUTTONS = ("start",)
RUNNING_BUTTONS = ("end_timer", "end_shift")

OPEN = "open"
DISMISS = "dismiss"


@dataclass(frozen=True)
class ScreenState:
    timer_text: str
    buttons: Tuple[str, ...]
    selector_visible: bool
    total_text: str


def screen_state(session) -> ScreenState:
    return ScreenState(
        timer_text=session.elapsed_display,
        buttons=RUNNING_BUTTONS if session.timing else START_BUTTONS,
        selector_visible=session.pending_task_selection,
        total_text=f"Logged: {len(session.shifts)} segment(s) | Total: {format_time(session.total_seconds)}",
    )


def selector_change(state: ScreenState, is_open: bool) -> Optional[str]:
    """OPEN, DISMISS or None when the popup already matches the session."""
    if state.selector_visible and not is_open:
        return OPEN
    if not state.selector_visible and is_open:
        return DISMISS
    return None


def task_choices(session) -> Tuple[Tuple[str, Callable[..., None]], ...]:
    """One (label, on_press) pair per task category, in display order."""

    def choose(task):
        def _on_press(*args):
            session.confirm_task(task)
        return _on_press

    return tuple((task.value, choose(task)) for task in TaskCategory)


def dismiss_handler(session) -> Callable[..., None]:
    # kivy treats a True from an on_dismiss handler as a veto
    def _on_dismiss(*args):
        session.dismiss_task_selection()
    return _on_dismiss
