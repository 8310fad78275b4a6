# shifttracker/config.py

# ---------------- Theme ----------------
COLOR_BACKGROUND = (1.0, 0.98, 0.97, 1)
COLOR_TABLE = (0.95, 0.95, 0.98, 1)
COLOR_TEXT = (0.1, 0.1, 0.12, 1)
COLOR_SUBTEXT = (0.35, 0.35, 0.4, 1)

COLOR_START = (0.18, 0.4, 0.62, 1)          # blue
COLOR_END_TIMER = (0.91, 0.37, 0.37, 1)     # light red
COLOR_END_SHIFT = (0.63, 0.24, 0.24, 1)     # dark red
COLOR_EXPORT = (0.3, 0.69, 0.31, 1)         # green
COLOR_MODAL_BG = (0, 0, 0, 0.5)

# ---------------- Files ----------------
ERROR_LOG = "error.log"
EXPORT_PREFIX = "shifts_"
EXPORT_DATE_FORMAT = "%Y-%m-%d"

# ---------------- Timer ----------------
TICK_INTERVAL = 1.0
CLOCK_FORMAT = "%I:%M %p"

# column order of the log table and the exported csv
CSV_FIELDS = ("startTime", "endTime", "duration", "task")
TABLE_HEADERS = ("Start Time", "End Time", "Duration", "Task")
