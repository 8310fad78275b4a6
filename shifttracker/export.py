# shifttracker/export.py
import csv
import io
import os
from datetime import date
from typing import Callable, Iterable, Optional

from kivy.logger import Logger

from shifttracker.config import CSV_FIELDS, EXPORT_PREFIX
from shifttracker.errors import ExportFailure
from shifttracker.formatting import export_date
from shifttracker.models import ShiftRecord


def export_to_csv(shifts: Iterable[ShiftRecord]) -> str:
    """
    Header row plus one row per record, in list order.
    Fields are the display strings as shown in the log table.
    """
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS, lineterminator="\r\n")
    writer.writeheader()
    for record in shifts:
        writer.writerow(record.as_row())
    return buf.getvalue()


def export_filename(today: date = None) -> str:
    return f"{EXPORT_PREFIX}{export_date(today)}.csv"


def write_export(
    shifts: Iterable[ShiftRecord],
    directory: str,
    share: Optional[Callable[[str], None]] = None,
    today: date = None,
) -> str:
    """
    Write the csv into ``directory`` and hand the path to ``share``.
    Returns the written path. Any failure is raised as ExportFailure.
    """
    csv_text = export_to_csv(shifts)
    path = os.path.join(directory, export_filename(today))
    try:
        os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(csv_text)
    except OSError as e:
        raise ExportFailure(f"could not write {path}: {e}") from e

    Logger.info(f"ShiftTracker: exported {path}")
    if share is not None:
        try:
            share(path)
        except Exception as e:
            raise ExportFailure(f"could not share {path}: {e}") from e
    return path
