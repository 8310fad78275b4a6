# shifttracker/formatting.py
from datetime import date, datetime

from shifttracker.config import CLOCK_FORMAT, EXPORT_DATE_FORMAT


def format_time(sec: int) -> str:
    # hours are padded to two digits but never truncated (100:00:00 stays as is)
    sec = max(0, int(sec))
    h = sec // 3600
    m = (sec % 3600) // 60
    s = sec % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_clock(moment: datetime) -> str:
    return moment.strftime(CLOCK_FORMAT)


def export_date(today: date = None) -> str:
    if today is None:
        today = datetime.now().date()
    return today.strftime(EXPORT_DATE_FORMAT)
