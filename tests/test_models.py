from datetime import datetime

import pytest

from shifttracker.config import CSV_FIELDS
from shifttracker.models import ShiftRecord, TaskCategory


def test_task_categories_are_the_fixed_six():
    assert [t.value for t in TaskCategory] == [
        "Clinical", "Non-Clinical", "Billable", "Non-Billable", "Education", "Break",
    ]


def test_parse_accepts_label_and_member():
    assert TaskCategory.parse("Non-Billable") is TaskCategory.NON_BILLABLE
    assert TaskCategory.parse(TaskCategory.BREAK) is TaskCategory.BREAK


def test_parse_rejects_unknown_label():
    with pytest.raises(ValueError):
        TaskCategory.parse("Lunch")
    with pytest.raises(ValueError):
        TaskCategory.parse("clinical")


def test_record_formats_fields():
    record = ShiftRecord(
        start=datetime(2026, 10, 19, 9, 0, 0),
        end=datetime(2026, 10, 19, 9, 30, 0, 900000),
        task=TaskCategory.CLINICAL,
    )
    assert record.seconds == 1800
    assert record.as_row() == {
        "startTime": "09:00 AM",
        "endTime": "09:30 AM",
        "duration": "00:30:00",
        "task": "Clinical",
    }
    assert tuple(record.as_row()) == CSV_FIELDS


def test_record_is_immutable():
    record = ShiftRecord(datetime(2026, 1, 1, 8), datetime(2026, 1, 1, 9), TaskCategory.BREAK)
    with pytest.raises(AttributeError):
        record.task = TaskCategory.CLINICAL
