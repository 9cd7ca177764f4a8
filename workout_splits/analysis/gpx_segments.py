"""
GPX Segment Extraction

Converts a recorded GPX track into distance segments for split calculation:
- One segment per pair of consecutive timed track points
- Track segment breaks (<trkseg>) are treated as pause/resume pairs
"""

import math
from datetime import datetime
from typing import List, Optional

import gpxpy

from .models import DistanceSegment, EventKind, RawEvent, WorkoutActivity


class GPXActivityParser:
    """Builds a WorkoutActivity from GPX content"""

    def __init__(self, gpx_content: str, activity_id: str = None):
        """
        Initialize parser with GPX content.

        Args:
            gpx_content: Raw GPX file content
            activity_id: Optional ID for tracking
        """
        self.gpx = gpxpy.parse(gpx_content)
        self.activity_id = activity_id or "unknown"
        self._segments: List[DistanceSegment] = []
        self._events: List[RawEvent] = []
        self._start_time: Optional[datetime] = None
        self._end_time: Optional[datetime] = None
        self._extract_segments()

    def _extract_segments(self) -> None:
        """Walk track points, emitting distance segments and break events"""
        for track in self.gpx.tracks:
            for track_segment in track.segments:
                timed_points = [p for p in track_segment.points if p.time is not None]
                if not timed_points:
                    continue

                if self._end_time is not None and timed_points[0].time >= self._end_time:
                    # Recording resumed in a new track segment
                    self._events.append(RawEvent(EventKind.PAUSE, self._end_time))
                    self._events.append(
                        RawEvent(EventKind.RESUME, timed_points[0].time)
                    )
                if self._start_time is None:
                    self._start_time = timed_points[0].time

                for prev_point, point in zip(timed_points, timed_points[1:]):
                    if point.time < prev_point.time:
                        continue
                    distance = self._haversine_distance(
                        prev_point.latitude,
                        prev_point.longitude,
                        point.latitude,
                        point.longitude,
                    )
                    self._segments.append(
                        DistanceSegment(
                            distance_meters=distance,
                            start_time=prev_point.time,
                            end_time=point.time,
                        )
                    )

                last_time = timed_points[-1].time
                if self._end_time is None or last_time > self._end_time:
                    self._end_time = last_time

    @staticmethod
    def _haversine_distance(
        lat1: float, lon1: float, lat2: float, lon2: float
    ) -> float:
        """Calculate great-circle distance in meters"""
        R = 6371000
        lat1_rad = math.radians(lat1)
        lat2_rad = math.radians(lat2)
        delta_lat = math.radians(lat2 - lat1)
        delta_lon = math.radians(lon2 - lon1)

        a = (
            math.sin(delta_lat / 2) ** 2
            + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
        )
        c = 2 * math.asin(math.sqrt(a))

        return R * c

    def to_activity(self) -> WorkoutActivity:
        """
        Build the activity.

        Raises:
            ValueError: If the track has no timestamped points
        """
        if self._start_time is None:
            raise ValueError("No timestamped track points found")

        name = None
        sport = None
        for track in self.gpx.tracks:
            if track.name and name is None:
                name = track.name
            if track.type and sport is None:
                sport = track.type

        return WorkoutActivity(
            activity_id=self.activity_id,
            start_time=self._start_time,
            end_time=self._end_time,
            total_distance_m=sum(s.distance_meters for s in self._segments),
            segments=list(self._segments),
            events=list(self._events),
            sport=sport,
            source_name=self.gpx.creator or name,
        )


def parse_gpx_activity(gpx_content: str, activity_id: str = None) -> WorkoutActivity:
    """Parse GPX content into a WorkoutActivity"""
    return GPXActivityParser(gpx_content, activity_id).to_activity()
