"""
Busiest-interval scan over a turnstile journal (sweep line).

Every visit contributes two events: +1 at its enter time and -1 at its leave
time. Events are processed in time order, enters before leaves at the same
minute, so a person leaving at 10:00 and another entering at 10:00 count as
overlapping for that instant.

While sweeping we track the running head count and:
  1) on a new maximum, open a candidate period and forget older periods;
  2) when the count drops from the maximum, close the period and keep it if
     it is strictly longer than the best one (the earliest wins ties);
  3) when the count climbs back to the maximum, open a new candidate period.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .events import Visit, format_time

EVENT_ENTER = 1
EVENT_LEAVE = -1


@dataclass(frozen=True)
class BusiestInterval:
    max_people: int
    start: int  # minutes since midnight
    end: int


def _sorted_events(visits: Sequence[Visit]) -> tuple[np.ndarray, np.ndarray]:
    """Return (times, kinds) ordered by time, enters first on ties."""
    n = len(visits)
    times = np.empty(2 * n, dtype=np.int64)
    kinds = np.empty(2 * n, dtype=np.int64)
    for i, v in enumerate(visits):
        times[2 * i], kinds[2 * i] = v.enter, EVENT_ENTER
        times[2 * i + 1], kinds[2 * i + 1] = v.leave, EVENT_LEAVE

    # lexsort uses the last key as the primary one
    order = np.lexsort((-kinds, times))
    return times[order], kinds[order]


def busiest_interval(visits: Sequence[Visit]) -> BusiestInterval:
    """
    Find the maximum number of people present at once and the longest
    period during which that maximum held.

    An empty journal yields BusiestInterval(0, 0, 0).
    """
    if not visits:
        return BusiestInterval(0, 0, 0)

    times, kinds = _sorted_events(visits)

    current = 0
    max_people = 0
    period_start = 0
    best_duration = -1
    result_start = 0
    result_end = 0

    for t, k in zip(times.tolist(), kinds.tolist()):
        prev = current
        current += k

        if current > max_people:
            max_people = current
            period_start = t
            best_duration = -1
        elif prev == max_people and current < max_people:
            duration = t - period_start
            if duration > best_duration:
                best_duration = duration
                result_start = period_start
                result_end = t
        elif prev < max_people and current == max_people:
            period_start = t

    return BusiestInterval(max_people, result_start, result_end)


def render_result(result: BusiestInterval) -> str:
    """Two-line report: the head count, then "HH:MM HH:MM"."""
    return f"{result.max_people}\n{format_time(result.start)} {format_time(result.end)}\n"
