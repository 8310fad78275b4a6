# shifttracker/ticker.py
from kivy.clock import Clock

from shifttracker.config import TICK_INTERVAL


class Ticker:
    """
    Cancellable periodic callback on top of kivy's Clock.
    At most one scheduled event exists at any time.
    """

    def __init__(self, callback, interval=TICK_INTERVAL, schedule_interval=None):
        self.callback = callback
        self.interval = interval
        self._schedule_interval = schedule_interval or Clock.schedule_interval
        self.event = None

    @property
    def active(self) -> bool:
        return self.event is not None

    def start(self):
        if self.event is None:
            self.event = self._schedule_interval(self._fire, self.interval)

    def stop(self):
        if self.event is not None:
            self.event.cancel()
            self.event = None

    def restart(self):
        self.stop()
        self.start()

    def _fire(self, dt):
        # a stale event that fires after stop() must not count
        if self.event is None:
            return False
        self.callback(dt)
