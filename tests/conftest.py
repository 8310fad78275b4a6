import os
from datetime import datetime, timedelta

import pytest

os.environ.setdefault("KIVY_NO_ARGS", "1")

from shifttracker.session import ShiftSession  # noqa: E402


class FakeEvent:
    def __init__(self, clock, callback, interval):
        self.clock = clock
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    def cancel(self):
        self.cancelled = True
        if self in self.clock.events:
            self.clock.events.remove(self)


class FakeClock:
    """Wall clock and Clock.schedule_interval stand-in, advanced by hand one second at a time."""

    def __init__(self, start=datetime(2026, 10, 19, 9, 0, 0)):
        self.current = start
        self.events = []

    def now(self):
        return self.current

    def schedule_interval(self, callback, interval):
        event = FakeEvent(self, callback, interval)
        self.events.append(event)
        return event

    def advance(self, seconds):
        for _ in range(int(seconds)):
            self.current += timedelta(seconds=1)
            for event in list(self.events):
                if not event.cancelled:
                    event.callback(1.0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    return ShiftSession(now=clock.now, schedule_interval=clock.schedule_interval)
