from .events import MAX_RECORDS, JournalFormatError, Visit, format_time, parse_journal, to_minutes
from .sweep import BusiestInterval, busiest_interval, render_result

__all__ = [
    "MAX_RECORDS", "JournalFormatError", "Visit", "format_time", "parse_journal", "to_minutes",
    "BusiestInterval", "busiest_interval", "render_result",
]
