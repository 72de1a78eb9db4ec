"""
Turnstile journal parsing.

Journal format (plain text):
  N
  HH:MM HH:MM      <- enter time, leave time of one visit
  ...              <- N records in total

Times are converted to minutes since midnight so they compare as ints.
Any amount of whitespace (including newlines) may separate the fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

# Upper bound on the number of visits in one journal.
MAX_RECORDS = 10000

_COUNT_RE = re.compile(r"\s*(\d+)")
_RECORD_RE = re.compile(r"\s*(\d+):(\d+)\s+(\d+):(\d+)")


class JournalFormatError(ValueError):
    """Raised when a journal's count or one of its records is malformed."""


@dataclass(frozen=True)
class Visit:
    enter: int  # minutes since midnight
    leave: int


def to_minutes(hours: int, minutes: int) -> int:
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """Minutes since midnight -> zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_journal(text: str) -> List[Visit]:
    """
    Parse journal text into a list of visits.

    Raises:
      JournalFormatError if the record count is missing or outside
      [0, MAX_RECORDS], or if fewer than N well-formed records follow it.
      Anything after the N-th record is ignored.
    """
    m = _COUNT_RE.match(text)
    if m is None:
        raise JournalFormatError("journal must start with the number of records")
    n = int(m.group(1))
    if n > MAX_RECORDS:
        raise JournalFormatError(f"too many records: {n} (max {MAX_RECORDS})")

    visits: List[Visit] = []
    pos = m.end()
    for idx in range(1, n + 1):
        r = _RECORD_RE.match(text, pos)
        if r is None:
            raise JournalFormatError(f"record {idx} of {n} is missing or malformed")
        h1, m1, h2, m2 = (int(g) for g in r.groups())
        visits.append(Visit(enter=to_minutes(h1, m1), leave=to_minutes(h2, m2)))
        pos = r.end()

    return visits
