"""Fixtures with realistic Garmin API response dicts for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def garmin_hrv_data() -> dict:
    return {
        "hrvSummary": {
            "calendarDate": "2026-03-03",
            "weeklyAvg": 52.0,
            "lastNightAvg": 48.0,
            "lastNight5MinHigh": 65.0,
            "status": "BALANCED",
        },
    }


@pytest.fixture
def garmin_sleep_data() -> dict:
    return {
        "dailySleepDTO": {
            "calendarDate": "2026-03-03",
            "sleepTimeSeconds": 25200,
            "sleepScores": {
                "overall": {"value": 55.0, "qualifierKey": "FAIR"},
                "totalDuration": {"value": 60.0, "qualifierKey": "FAIR"},
            },
        }
    }


@pytest.fixture
def garmin_stats_data() -> dict:
    return {
        "calendarDate": "2026-03-03",
        "totalSteps": 9876,
        "restingHeartRate": 49,
        "maxHeartRate": 171,
    }


@pytest.fixture
def garmin_training_readiness_data() -> list:
    return [
        {
            "calendarDate": "2026-03-03",
            "score": 72.0,
            "level": "MODERATE",
            "sleepScore": 55,
            "recoveryScore": 65,
        }
    ]


@pytest.fixture
def garmin_full_metrics(
    garmin_hrv_data,
    garmin_sleep_data,
    garmin_stats_data,
    garmin_training_readiness_data,
) -> dict:
    """Full pull_daily_metrics() return value with all endpoints populated."""
    return {
        "training_readiness": garmin_training_readiness_data,
        "sleep": garmin_sleep_data,
        "hrv": garmin_hrv_data,
        "stats": garmin_stats_data,
    }


@pytest.fixture
def garmin_activities() -> list:
    """get_activities_by_date() response covering one training week."""
    return [
        {
            "activityId": 1001,
            "activityName": "Oslo Running",
            "startTimeLocal": "2026-03-03 06:45:12",
            "activityType": {"typeKey": "running", "typeId": 1},
            "duration": 3612.4,
            "distance": 10234.7,
            "directWorkoutRpe": 60,
        },
        {
            "activityId": 1002,
            "activityName": "Strength",
            "startTimeLocal": "2026-03-04 18:00:00",
            "activityType": {"typeKey": "strength_training", "typeId": 13},
            "duration": 4200.0,
            "distance": 0.0,
        },
        {
            "activityId": 1003,
            "activityName": "Evening Ride",
            "startTimeLocal": "2026-03-07 17:30:00",
            "activityType": {"typeKey": "road_biking", "typeId": 10},
            "duration": 5400.0,
            "distance": 40120.0,
        },
        {
            "activityId": 1004,
            "activityName": "Broken",
            "activityType": {"typeKey": "running"},
            "duration": 600.0,
        },
    ]
