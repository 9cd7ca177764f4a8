"""
Pause Interval Extraction

Turns a workout's pause/resume events into closed pause intervals and
reports whole-activity paused and active time.
"""

from datetime import datetime
from functools import reduce
from typing import Iterable, Optional, Sequence, Tuple

from .active_time import calculate_active_time
from .models import EventKind, PauseInterval, RawEvent

# (intervals emitted so far, start of the pending unmatched pause)
_ScanState = Tuple[Tuple[PauseInterval, ...], Optional[datetime]]


def _scan_event(state: _ScanState, event: RawEvent) -> _ScanState:
    intervals, pending_start = state

    if event.kind is EventKind.PAUSE:
        # Only the most recent unmatched pause is tracked
        return intervals, event.timestamp

    if event.kind is EventKind.RESUME and pending_start is not None:
        interval = PauseInterval(start=pending_start, end=event.timestamp)
        return intervals + (interval,), None

    return intervals, pending_start


def extract_pause_intervals(
    events: Iterable[RawEvent], activity_end: datetime
) -> Tuple[PauseInterval, ...]:
    """
    Pair pause and resume events into pause intervals.

    Events are sorted by timestamp before scanning. Resumes without a
    pending pause are ignored, and a pause still open at the end of the
    scan is closed at the activity end time.

    Args:
        events: Raw workout events (any order)
        activity_end: End time of the whole activity

    Returns:
        Pause intervals in chronological order
    """
    ordered = sorted(events, key=lambda e: e.timestamp)
    intervals, pending_start = reduce(_scan_event, ordered, ((), None))

    if pending_start is not None:
        # Activity ended while paused
        intervals += (PauseInterval(start=pending_start, end=activity_end),)

    return intervals


def has_pauses(events: Iterable[RawEvent]) -> bool:
    """Whether any pause or resume event is present"""
    return any(e.kind in (EventKind.PAUSE, EventKind.RESUME) for e in events)


def total_paused_seconds(pause_intervals: Sequence[PauseInterval]) -> float:
    return sum(p.duration_seconds for p in pause_intervals)


def activity_active_seconds(
    activity_start: datetime,
    activity_end: datetime,
    events: Iterable[RawEvent],
) -> float:
    """Active (non-paused) duration of a whole activity in seconds"""
    intervals = extract_pause_intervals(events, activity_end)
    return calculate_active_time(activity_start, activity_end, intervals)
