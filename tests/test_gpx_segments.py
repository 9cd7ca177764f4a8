"""
Tests for GPX Segment Extraction

Tests for turning GPX tracks into distance segments and pause events.
"""

from datetime import datetime, timezone

import pytest
from workout_splits.analysis.gpx_segments import GPXActivityParser, parse_gpx_activity
from workout_splits.analysis.models import EventKind, SplitConfiguration
from workout_splits.analysis.split_calculator import SplitCalculator


# 11 points 0.001 degrees of latitude apart (~111m), one minute each
SAMPLE_GPX_WITH_TIME = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Workout Splits Test">
  <trk>
    <name>Morning Run</name>
    <type>running</type>
    <trkseg>
      <trkpt lat="51.5000" lon="-0.1000"><time>2026-01-15T08:00:00Z</time></trkpt>
      <trkpt lat="51.5010" lon="-0.1000"><time>2026-01-15T08:01:00Z</time></trkpt>
      <trkpt lat="51.5020" lon="-0.1000"><time>2026-01-15T08:02:00Z</time></trkpt>
      <trkpt lat="51.5030" lon="-0.1000"><time>2026-01-15T08:03:00Z</time></trkpt>
      <trkpt lat="51.5040" lon="-0.1000"><time>2026-01-15T08:04:00Z</time></trkpt>
      <trkpt lat="51.5050" lon="-0.1000"><time>2026-01-15T08:05:00Z</time></trkpt>
      <trkpt lat="51.5060" lon="-0.1000"><time>2026-01-15T08:06:00Z</time></trkpt>
      <trkpt lat="51.5070" lon="-0.1000"><time>2026-01-15T08:07:00Z</time></trkpt>
      <trkpt lat="51.5080" lon="-0.1000"><time>2026-01-15T08:08:00Z</time></trkpt>
      <trkpt lat="51.5090" lon="-0.1000"><time>2026-01-15T08:09:00Z</time></trkpt>
      <trkpt lat="51.5100" lon="-0.1000"><time>2026-01-15T08:10:00Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>"""

# Two track segments with a three minute gap between them
SAMPLE_GPX_WITH_BREAK = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Workout Splits Test">
  <trk>
    <name>Run With Stop</name>
    <trkseg>
      <trkpt lat="51.5000" lon="-0.1000"><time>2026-01-15T08:00:00Z</time></trkpt>
      <trkpt lat="51.5010" lon="-0.1000"><time>2026-01-15T08:01:00Z</time></trkpt>
      <trkpt lat="51.5020" lon="-0.1000"><time>2026-01-15T08:02:00Z</time></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="51.5020" lon="-0.1000"><time>2026-01-15T08:05:00Z</time></trkpt>
      <trkpt lat="51.5030" lon="-0.1000"><time>2026-01-15T08:06:00Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>"""

# Second track segment starts before the first one ended
SAMPLE_GPX_WITH_OVERLAP = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Workout Splits Test">
  <trk>
    <trkseg>
      <trkpt lat="51.5000" lon="-0.1000"><time>2026-01-15T08:00:00Z</time></trkpt>
      <trkpt lat="51.5010" lon="-0.1000"><time>2026-01-15T08:01:00Z</time></trkpt>
      <trkpt lat="51.5020" lon="-0.1000"><time>2026-01-15T08:02:00Z</time></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="51.5020" lon="-0.1000"><time>2026-01-15T08:01:00Z</time></trkpt>
      <trkpt lat="51.5030" lon="-0.1000"><time>2026-01-15T08:03:00Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>"""

# GPX without timestamps (a planned route)
UNTIMED_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1">
  <trk>
    <trkseg>
      <trkpt lat="51.5" lon="-0.1"><ele>100</ele></trkpt>
      <trkpt lat="51.51" lon="-0.1"><ele>110</ele></trkpt>
    </trkseg>
  </trk>
</gpx>"""


def utc(hour, minute):
    return datetime(2026, 1, 15, hour, minute, tzinfo=timezone.utc)


class TestGPXActivityParser:
    """Tests for GPXActivityParser"""

    def test_haversine_distance_calculation(self):
        """0.01 degrees of latitude is about 1.11km"""
        dist = GPXActivityParser._haversine_distance(51.5, -0.1, 51.51, -0.1)
        assert 1000 < dist < 1200

    def test_segments_between_points(self):
        """Each pair of consecutive points becomes a segment"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_TIME, "gpx-001")

        assert activity.activity_id == "gpx-001"
        assert len(activity.segments) == 10
        for segment in activity.segments:
            assert segment.duration_seconds == 60
            assert segment.distance_meters == pytest.approx(111.19, abs=0.5)

    def test_activity_window(self):
        """Start and end come from the first and last timed points"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_TIME)

        assert activity.start_time == utc(8, 0)
        assert activity.end_time == utc(8, 10)
        assert activity.elapsed_seconds == 600

    def test_total_distance(self):
        """Total distance is the sum of segment distances"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_TIME)
        assert activity.total_distance_m == pytest.approx(
            sum(s.distance_meters for s in activity.segments)
        )
        assert 1100 < activity.total_distance_m < 1125

    def test_metadata(self):
        """Sport and source come from the track type and creator"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_TIME)
        assert activity.sport == "running"
        assert activity.source_name == "Workout Splits Test"

    def test_continuous_track_has_no_events(self):
        """A single track segment has no pauses"""
        assert parse_gpx_activity(SAMPLE_GPX_WITH_TIME).events == []

    def test_track_segment_break_becomes_pause(self):
        """A gap between track segments is a pause/resume pair"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_BREAK)

        assert len(activity.segments) == 3
        assert [e.kind for e in activity.events] == [EventKind.PAUSE, EventKind.RESUME]
        assert activity.events[0].timestamp == utc(8, 2)
        assert activity.events[1].timestamp == utc(8, 5)

    def test_untimed_gpx_rejected(self):
        """A track without timestamps cannot be split"""
        with pytest.raises(ValueError):
            parse_gpx_activity(UNTIMED_GPX)


class TestGPXSplits:
    """End-to-end split calculation from GPX"""

    def test_kilometer_splits(self):
        """~1.11km gives one full kilometer and a partial split"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_TIME)
        splits = SplitCalculator().calculate_splits(
            activity, SplitConfiguration.kilometers(1.0)
        )

        assert len(splits) == 2
        assert not splits[0].is_partial
        assert splits[1].is_partial
        assert splits[0].duration_seconds + splits[1].duration_seconds == pytest.approx(
            600, abs=1e-5
        )

    def test_break_excluded_from_split_time(self):
        """Time between track segments is excluded when configured"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_BREAK)
        with_pause = SplitCalculator().calculate_splits(
            activity, SplitConfiguration.kilometers(1.0, exclude_paused_time=True)
        )
        elapsed = SplitCalculator().calculate_splits(
            activity, SplitConfiguration.kilometers(1.0)
        )

        assert len(with_pause) == 1
        assert with_pause[0].is_partial
        assert elapsed[0].duration_seconds == pytest.approx(360)
        assert with_pause[0].duration_seconds == pytest.approx(180)

    def test_overlapping_track_segments_have_no_pause(self):
        """A track segment starting before the previous one ended is not a pause"""
        activity = parse_gpx_activity(SAMPLE_GPX_WITH_OVERLAP)

        assert activity.events == []
        assert activity.end_time == utc(8, 3)

        splits = SplitCalculator().calculate_splits(
            activity, SplitConfiguration.kilometers(1.0, exclude_paused_time=True)
        )
        assert len(splits) == 1
        assert splits[0].is_partial
        assert splits[0].duration_seconds == pytest.approx(180)
