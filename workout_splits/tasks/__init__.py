"""
Workout Splits Worker Tasks Package
"""

from ..celery_app import app

# Import all tasks to ensure they're registered with Celery
from .split_tasks import (
    calculate_splits_from_segments,
    calculate_workout_splits,
    summarize_pauses,
)

__all__ = [
    "app",
    "calculate_splits_from_segments",
    "calculate_workout_splits",
    "summarize_pauses",
]
