"""
Workout Splits Worker

This module provides Celery tasks for:
- GPX/FIT activity parsing into distance segments
- Pause interval extraction and active time reporting
- Fixed-distance split calculation (mile/km/custom)

Tasks are registered on the app in `workout_splits.celery_app`.
"""
