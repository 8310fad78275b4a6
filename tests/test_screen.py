from shifttracker.models import SessionPhase, TaskCategory
from shifttracker.screen import (
    DISMISS,
    OPEN,
    RUNNING_BUTTONS,
    START_BUTTONS,
    dismiss_handler,
    screen_state,
    selector_change,
    task_choices,
)


def test_idle_shows_start_button(session):
    state = screen_state(session)
    assert state.buttons == START_BUTTONS
    assert not state.selector_visible
    assert state.timer_text == "00:00:00"
    assert selector_change(state, is_open=False) is None


def test_request_start_opens_selector(session):
    session.request_start()
    state = screen_state(session)
    assert state.buttons == START_BUTTONS
    assert selector_change(state, is_open=False) == OPEN
    assert selector_change(state, is_open=True) is None


def test_running_shows_end_buttons_and_closes_selector(session, clock):
    session.request_start()
    session.confirm_task("Clinical")
    clock.advance(3)
    state = screen_state(session)
    assert state.buttons == RUNNING_BUTTONS
    assert state.timer_text == "00:00:03"
    assert selector_change(state, is_open=True) == DISMISS


def test_continue_keeps_end_buttons_and_reopens_selector(session, clock):
    session.request_start()
    session.confirm_task("Break")
    clock.advance(90)
    session.end_segment_and_continue()
    state = screen_state(session)
    assert state.buttons == RUNNING_BUTTONS
    assert selector_change(state, is_open=False) == OPEN
    assert state.total_text == "Logged: 1 segment(s) | Total: 00:01:30"


def test_task_choices_cover_every_category_in_order(session):
    labels = [label for label, _ in task_choices(session)]
    assert labels == [t.value for t in TaskCategory]


def test_choice_button_confirms_its_task(session):
    choices = dict(task_choices(session))
    session.request_start()
    choices["Education"]("button instance")
    assert session.phase is SessionPhase.RUNNING
    assert session.selected_task is TaskCategory.EDUCATION


def test_dismiss_handler_never_vetoes(session):
    on_dismiss = dismiss_handler(session)
    session.request_start()
    assert on_dismiss("popup") is None
    assert session.phase is SessionPhase.IDLE
