"""
FIT File Parser

Parses Garmin/ANT+ FIT files into a WorkoutActivity for split calculation.

- `record` messages carry cumulative distance; consecutive records become
  distance segments
- `event` messages for the timer become pause/resume events
- The `session` message supplies sport, start time and totals

Uses the fitparse library to decode FIT files.
"""

import io
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from fitparse import FitFile

from .models import DistanceSegment, EventKind, RawEvent, WorkoutActivity

logger = logging.getLogger(__name__)

# Timer event types that stop the activity clock
TIMER_STOP_TYPES = {"stop", "stop_all", "stop_disable", "stop_disable_all"}
TIMER_START_TYPES = {"start"}


def _timer_event_kind(values: Dict[str, Any]) -> EventKind:
    if values.get("event") != "timer":
        return EventKind.OTHER
    event_type = values.get("event_type")
    if event_type in TIMER_STOP_TYPES:
        return EventKind.PAUSE
    if event_type in TIMER_START_TYPES:
        return EventKind.RESUME
    return EventKind.OTHER


def build_fit_activity(messages: Iterable[Any], activity_id: str = None) -> WorkoutActivity:
    """
    Build a WorkoutActivity from decoded FIT messages.

    Args:
        messages: fitparse data messages (anything with `name` and `get_values()`)
        activity_id: Optional ID for tracking

    Returns:
        WorkoutActivity with segments and timer events

    Raises:
        ValueError: If no timestamped records are present
    """
    sport = None
    source_name = None
    session_start: Optional[datetime] = None
    total_distance_m: Optional[float] = None
    total_elapsed_time_s: Optional[float] = None

    segments: List[DistanceSegment] = []
    events: List[RawEvent] = []
    prev_time: Optional[datetime] = None
    prev_distance: Optional[float] = None
    first_time: Optional[datetime] = None
    last_time: Optional[datetime] = None

    for message in messages:
        values = message.get_values()

        if message.name == "session":
            sport = str(values["sport"]) if values.get("sport") else sport
            session_start = values.get("start_time") or session_start
            if values.get("total_distance") is not None:
                total_distance_m = float(values["total_distance"])
            if values.get("total_elapsed_time") is not None:
                total_elapsed_time_s = float(values["total_elapsed_time"])

        elif message.name == "file_id":
            manufacturer = values.get("manufacturer")
            product = values.get("product_name") or values.get("garmin_product")
            if manufacturer:
                source_name = f"{manufacturer} {product}" if product else str(manufacturer)

        elif message.name == "event":
            timestamp = values.get("timestamp")
            if timestamp is not None:
                events.append(RawEvent(_timer_event_kind(values), timestamp))

        elif message.name == "record":
            timestamp = values.get("timestamp")
            distance = values.get("distance")
            if timestamp is None:
                continue

            if first_time is None:
                first_time = timestamp
            last_time = max(last_time, timestamp) if last_time else timestamp

            if distance is None:
                continue
            distance = float(distance)

            if prev_time is not None and timestamp >= prev_time:
                delta = distance - prev_distance
                if delta < 0:
                    logger.warning(
                        f"Cumulative distance went backwards at {timestamp.isoformat()}, "
                        f"skipping segment"
                    )
                else:
                    segments.append(
                        DistanceSegment(
                            distance_meters=delta,
                            start_time=prev_time,
                            end_time=timestamp,
                        )
                    )
            prev_time = timestamp
            prev_distance = distance

    start_time = session_start or first_time
    if start_time is None:
        raise ValueError("No timestamped records found in FIT file")

    if total_elapsed_time_s is not None:
        end_time = start_time + timedelta(seconds=total_elapsed_time_s)
    else:
        end_time = last_time or start_time

    if total_distance_m is None:
        total_distance_m = prev_distance

    return WorkoutActivity(
        activity_id=activity_id or "unknown",
        start_time=start_time,
        end_time=end_time,
        total_distance_m=total_distance_m,
        segments=segments,
        events=events,
        sport=sport,
        source_name=source_name,
    )


def parse_fit_content(fit_content: bytes, activity_id: str = None) -> WorkoutActivity:
    """
    Parse FIT file content into a WorkoutActivity.

    Args:
        fit_content: Raw FIT file content as bytes
        activity_id: Optional ID for tracking
    """
    fitfile = FitFile(io.BytesIO(fit_content))
    return build_fit_activity(fitfile.get_messages(), activity_id)
