"""Pure mapping from Garmin Connect payloads to planner inputs.

No I/O: takes the raw dicts returned by GarminClient and produces a
ReadinessSnapshot for the readiness adjustment, or ActualWorkout records for
the adherence analyzer. Every extractor tolerates missing or malformed data.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

from training_planner.models.readiness import ReadinessSnapshot
from training_planner.models.workout_log import ActualWorkout

logger = logging.getLogger(__name__)

# Garmin activityType.typeKey -> planner discipline tag
ACTIVITY_TYPE_TAGS: dict[str, str] = {
    "running": "run",
    "street_running": "run",
    "track_running": "run",
    "trail_running": "run",
    "treadmill_running": "run",
    "indoor_running": "run",
    "strength_training": "strength",
    "hiit": "metcon",
    "indoor_cardio": "hyrox",
    "fitness_equipment": "gym",
    "walking": "walk",
    "hiking": "walk",
    "yoga": "yoga",
    "mobility": "mobility",
}


def map_readiness_snapshot(raw: dict[str, Any]) -> Optional[ReadinessSnapshot]:
    """Build today's readiness from a pull_daily_metrics() result.

    Returns None when Garmin has no training-readiness score for the day;
    sleep, HRV and resting HR are optional.
    """
    score = _extract_readiness_score(raw.get("training_readiness"))
    if score is None:
        return None
    return ReadinessSnapshot(
        score=score,
        sleep_performance=_extract_sleep_score(raw.get("sleep")),
        hrv_ms=_extract_hrv(raw.get("hrv")),
        resting_hr=_extract_resting_hr(raw.get("stats")),
    )


def map_activities(raw: Iterable[Any]) -> list[ActualWorkout]:
    """Convert activity summaries to ActualWorkout records.

    Durations go from seconds to minutes, distances from metres to km and
    Garmin's 0-100 perceived effort to RPE 1-10. Entries without a start
    date are skipped.
    """
    workouts: list[ActualWorkout] = []
    for activity in raw or []:
        if not isinstance(activity, dict):
            continue
        day = _activity_date(activity)
        if day is None:
            logger.debug("Skipping activity without start time: %s", activity.get("activityId"))
            continue
        workout_id = activity.get("activityId")
        workouts.append(
            ActualWorkout(
                date=day,
                discipline=activity_tag(activity),
                duration_min=_scaled(activity.get("duration"), 1 / 60.0, 1),
                distance_km=_scaled(activity.get("distance"), 1 / 1000.0, 2),
                effort=_extract_effort(activity),
                workout_id=str(workout_id) if workout_id is not None else None,
            )
        )
    return workouts


def activity_tag(activity: dict[str, Any]) -> str:
    """Planner discipline tag for a Garmin activity (raw typeKey if unmapped)."""
    type_info = activity.get("activityType")
    key = type_info.get("typeKey") if isinstance(type_info, dict) else None
    if not key:
        return "other"
    return ACTIVITY_TYPE_TAGS.get(key, key)


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------


def _first_entry(data: Any) -> Optional[dict]:
    if isinstance(data, list):
        data = data[0] if data else None
    return data if isinstance(data, dict) else None


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _extract_readiness_score(data: Any) -> Optional[float]:
    entry = _first_entry(data)
    if entry is None:
        return None
    return _to_float(entry.get("score", entry.get("readinessScore")))


def _extract_sleep_score(data: Any) -> Optional[float]:
    """dailySleepDTO.sleepScores.overall.value"""
    if not isinstance(data, dict):
        return None
    try:
        return _to_float(data["dailySleepDTO"]["sleepScores"]["overall"]["value"])
    except (KeyError, TypeError):
        return None


def _extract_hrv(data: Any) -> Optional[float]:
    if not isinstance(data, dict):
        return None
    summary = data.get("hrvSummary")
    if not isinstance(summary, dict):
        return None
    return _to_float(summary.get("lastNightAvg"))


def _extract_resting_hr(data: Any) -> Optional[int]:
    if not isinstance(data, dict):
        return None
    value = _to_float(data.get("restingHeartRate"))
    return int(value) if value is not None else None


def _extract_effort(activity: dict[str, Any]) -> Optional[float]:
    """Garmin stores perceived effort as 10-100; the planner uses RPE 1-10."""
    value = _to_float(activity.get("directWorkoutRpe"))
    if value is None or value <= 0:
        return None
    return max(1.0, min(10.0, value / 10.0))


def _activity_date(activity: dict[str, Any]) -> Optional[date]:
    start = activity.get("startTimeLocal") or activity.get("startTimeGMT")
    if not start:
        return None
    try:
        return date.fromisoformat(str(start)[:10])
    except ValueError:
        return None


def _scaled(value: Any, factor: float, ndigits: int) -> Optional[float]:
    number = _to_float(value)
    if number is None:
        return None
    return round(number * factor, ndigits)
