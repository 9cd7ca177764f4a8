"""
Split Calculation Tasks

Celery tasks for splitting GPX/FIT activities and raw distance segments
into fixed-distance splits.
"""

import base64
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..analysis import (
    DistanceSegment,
    DistanceUnit,
    EventKind,
    PauseInterval,
    RawEvent,
    SplitAggregator,
    SplitCalculator,
    SplitCalculatorError,
    SplitConfiguration,
    activity_active_seconds,
    extract_pause_intervals,
    parse_fit_content,
    parse_gpx_activity,
    total_paused_seconds,
)
from . import app

logger = logging.getLogger(__name__)


def _parse_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _parse_event(data: Dict[str, Any]) -> RawEvent:
    try:
        kind = EventKind(str(data.get("kind", "other")).lower())
    except ValueError:
        kind = EventKind.OTHER
    return RawEvent(kind=kind, timestamp=_parse_time(data["timestamp"]))


@app.task(name="calculate_workout_splits", bind=True)
def calculate_workout_splits(
    self,
    activity_id: str,
    file_content: str,
    file_type: str = "gpx",
    split_distance: float = 1.0,
    unit: str = "mi",
    exclude_paused_time: bool = False,
) -> Dict[str, Any]:
    """
    Calculate distance splits for a GPX or FIT activity.

    Args:
        activity_id: Unique ID for the activity
        file_content: Raw file content (GPX as string, FIT as base64-encoded string)
        file_type: Type of file - "gpx" or "fit" (default: "gpx")
        split_distance: Split length in `unit` (default: 1.0)
        unit: "mi", "km" or "m" (default: "mi")
        exclude_paused_time: Subtract paused time from split durations

    Returns:
        Dict containing:
            - splits: List of split dicts in order
            - split_count: Number of splits
            - total_distance_m: Recorded activity distance
    """
    logger.info(
        f"[Task {self.request.id}] Starting calculate_workout_splits for "
        f"activity_id={activity_id}, type={file_type}, split={split_distance}{unit}"
    )

    try:
        configuration = SplitConfiguration.from_unit(
            float(split_distance), DistanceUnit(unit), exclude_paused_time
        )

        if file_type.lower() == "fit":
            activity = parse_fit_content(base64.b64decode(file_content), activity_id)
        else:
            activity = parse_gpx_activity(file_content, activity_id)

        splits = SplitCalculator().calculate_splits(activity, configuration)

        logger.info(
            f"[Task {self.request.id}] Calculated {len(splits)} splits "
            f"over {activity.total_distance_m:.2f}m"
        )

        return {
            "success": True,
            "activity_id": activity_id,
            "split_count": len(splits),
            "splits": [s.to_dict() for s in splits],
            "total_distance_m": activity.total_distance_m,
        }

    except SplitCalculatorError as e:
        logger.warning(
            f"[Task {self.request.id}] Cannot split activity {activity_id}: {e}"
        )
        return {"success": False, "activity_id": activity_id, **e.to_dict()}

    except Exception as e:
        logger.error(
            f"[Task {self.request.id}] Error splitting activity {activity_id}: {e}",
            exc_info=True,
        )
        return {
            "success": False,
            "error": str(e),
            "activity_id": activity_id,
        }


@app.task(name="calculate_splits_from_segments")
def calculate_splits_from_segments(
    segments: List[Dict[str, Any]],
    split_distance_m: float,
    pause_intervals: Optional[List[Dict[str, str]]] = None,
    activity_start: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Aggregate raw distance segments into splits.

    Args:
        segments: Dicts with distance_m, start_time and end_time (ISO strings),
            sorted by start_time
        split_distance_m: Split length in meters
        pause_intervals: Optional dicts with start and end (ISO strings)
        activity_start: Optional activity start (ISO string)

    Returns:
        Dict with the splits in order
    """
    try:
        SplitConfiguration(split_distance_m=split_distance_m).validate()

        parsed_segments = [
            DistanceSegment(
                distance_meters=float(s["distance_m"]),
                start_time=_parse_time(s["start_time"]),
                end_time=_parse_time(s["end_time"]),
            )
            for s in segments
        ]
        parsed_pauses = [
            PauseInterval(start=_parse_time(p["start"]), end=_parse_time(p["end"]))
            for p in pause_intervals or []
        ]

        splits = SplitAggregator().calculate_splits(
            parsed_segments,
            split_distance_m,
            parsed_pauses,
            _parse_time(activity_start) if activity_start else None,
        )

        return {
            "success": True,
            "split_count": len(splits),
            "splits": [s.to_dict() for s in splits],
        }

    except SplitCalculatorError as e:
        return {"success": False, **e.to_dict()}

    except Exception as e:
        logger.error(f"[Task] Error aggregating segments: {e}", exc_info=True)
        return {"success": False, "error": str(e)}


@app.task(name="summarize_pauses")
def summarize_pauses(
    events: List[Dict[str, str]], activity_start: str, activity_end: str
) -> Dict[str, Any]:
    """
    Pair pause/resume events and report paused and active time.

    Args:
        events: Dicts with kind ("pause", "resume", other) and timestamp (ISO)
        activity_start: Activity start (ISO string)
        activity_end: Activity end (ISO string)

    Returns:
        Dict with pause_intervals, total_paused_seconds and active_seconds
    """
    try:
        start = _parse_time(activity_start)
        end = _parse_time(activity_end)
        raw_events = [_parse_event(e) for e in events]
        intervals = extract_pause_intervals(raw_events, end)

        return {
            "success": True,
            "pause_intervals": [
                {"start": p.start.isoformat(), "end": p.end.isoformat()}
                for p in intervals
            ],
            "total_paused_seconds": total_paused_seconds(intervals),
            "active_seconds": activity_active_seconds(start, end, raw_events),
        }

    except Exception as e:
        logger.error(f"[Task] Error summarizing pauses: {e}", exc_info=True)
        return {"success": False, "error": str(e)}
