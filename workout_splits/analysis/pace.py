"""
Pace Calculation

Speed from distance and time, plus conversions to the min/mile and
min/km paces runners read.
"""

from .units import DistanceUnit, METERS_PER_KILOMETER, METERS_PER_MILE


def calculate_pace(distance_m: float, time_seconds: float) -> float:
    """
    Calculate speed in meters per second.

    Returns 0.0 when time is zero or negative instead of an infinite or
    negative pace.
    """
    if time_seconds <= 0:
        return 0.0
    return distance_m / time_seconds


def minutes_per_mile(speed_mps: float) -> float:
    if speed_mps <= 0:
        return 0.0
    return METERS_PER_MILE / speed_mps / 60


def minutes_per_kilometer(speed_mps: float) -> float:
    if speed_mps <= 0:
        return 0.0
    return METERS_PER_KILOMETER / speed_mps / 60


def format_pace(speed_mps: float, unit: DistanceUnit = DistanceUnit.MILES) -> str:
    """Format speed as pace, e.g. "8:30 /mi", "5:15 /km" or "2.50 m/s" """
    if unit is DistanceUnit.MILES:
        pace_min = minutes_per_mile(speed_mps)
    elif unit is DistanceUnit.KILOMETERS:
        pace_min = minutes_per_kilometer(speed_mps)
    else:
        if speed_mps <= 0:
            return "0:00"
        return f"{speed_mps:.2f} m/s"

    mins = int(pace_min)
    secs = int((pace_min - mins) * 60)
    return f"{mins}:{secs:02d} /{unit.value}"


def format_duration(seconds: float) -> str:
    """Format seconds as HH:MM:SS"""
    total = int(seconds)
    hours = total // 3600
    mins = (total % 3600) // 60
    secs = total % 60
    return f"{hours:02d}:{mins:02d}:{secs:02d}"
