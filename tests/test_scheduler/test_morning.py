"""Tests for the morning readiness job: file I/O in tmp_path, Garmin mocked."""

from __future__ import annotations

import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from garmin_client.exceptions import GarminAPIError, GarminAuthError
from scheduler import morning
from training_planner.exceptions import SerializationError
from training_planner.models.enums import Weekday
from training_planner.serialization import plan_to_dict, to_json_string


@pytest.fixture
def job_paths(tmp_path, monkeypatch, twelve_week_plan):
    plan_path = tmp_path / "plan.json"
    plan_path.write_text(to_json_string(plan_to_dict(twelve_week_plan)))
    readiness_path = tmp_path / "readiness.json"
    output_dir = tmp_path / "out"
    monkeypatch.setattr(morning, "PLAN_PATH", plan_path)
    monkeypatch.setattr(morning, "READINESS_PATH", readiness_path)
    monkeypatch.setattr(morning, "OUTPUT_DIR", output_dir)
    return plan_path, readiness_path, output_dir


@pytest.fixture
def garmin():
    client = MagicMock()
    client.pull_daily_metrics.return_value = {
        "training_readiness": [{"score": 40}],
        "sleep": None,
        "hrv": None,
        "stats": {"restingHeartRate": 52},
    }
    client.pull_activities.return_value = []
    return client


class TestLoaders:
    def test_load_plan_round_trip(self, job_paths, twelve_week_plan):
        assert morning.load_plan(job_paths[0]) == twelve_week_plan

    def test_load_plan_invalid_json(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text("{not json")
        with pytest.raises(SerializationError):
            morning.load_plan(path)

    def test_fallback_readiness(self, tmp_path):
        path = tmp_path / "readiness.json"
        path.write_text(json.dumps({"score": 28, "sleep": 55, "restingHR": 60}))
        snapshot = morning.load_fallback_readiness(path)
        assert snapshot.score == 28.0
        assert snapshot.sleep_performance == 55
        assert snapshot.resting_hr == 60

    def test_fallback_missing_or_empty(self, tmp_path):
        assert morning.load_fallback_readiness(tmp_path / "none.json") is None
        path = tmp_path / "readiness.json"
        path.write_text(json.dumps({"sleep": 80}))
        assert morning.load_fallback_readiness(path) is None


class TestSessionForDay:
    def test_finds_weekday_session(self, twelve_week_plan):
        session = morning.session_for_day(twelve_week_plan, date(2026, 3, 12))
        assert session.day == Weekday.THURSDAY
        assert session.week_number == 2

    def test_outside_plan(self, twelve_week_plan):
        assert morning.session_for_day(twelve_week_plan, date(2027, 1, 1)) is None


class TestMorningJob:
    def test_writes_recommendation(self, job_paths, garmin):
        path = morning.morning_job(today=date(2026, 3, 3), client=garmin)
        assert path == job_paths[2] / "recommendation_2026-03-03.json"
        data = json.loads(path.read_text())
        assert data["status"] == "warning"
        assert data["originalWorkout"]["subtype"] == "intervals_aerobic"
        assert data["adjustedWorkout"]["duration_minutes"] == 36
        garmin.pull_activities.assert_not_called()

    def test_falls_back_to_file_readiness(self, job_paths, garmin):
        _, readiness_path, _ = job_paths
        readiness_path.write_text(json.dumps({"score": 90, "sleep": 85}))
        garmin.pull_daily_metrics.return_value = {"training_readiness": None}

        path = morning.morning_job(today=date(2026, 3, 3), client=garmin)
        assert json.loads(path.read_text())["status"] == "prime"

    def test_garmin_error_uses_fallback(self, job_paths, garmin):
        job_paths[1].write_text(json.dumps({"score": 20}))
        garmin.pull_daily_metrics.side_effect = GarminAPIError("boom", status_code=500)
        path = morning.morning_job(today=date(2026, 3, 3), client=garmin)
        assert json.loads(path.read_text())["adjustedWorkout"]["type"] == "rest"

    def test_no_readiness_anywhere(self, job_paths, garmin):
        garmin.pull_daily_metrics.return_value = {}
        assert morning.morning_job(today=date(2026, 3, 3), client=garmin) is None

    def test_missing_plan(self, job_paths, garmin):
        job_paths[0].unlink()
        assert morning.morning_job(today=date(2026, 3, 3), client=garmin) is None

    def test_outside_plan(self, job_paths, garmin):
        assert morning.morning_job(today=date(2027, 1, 5), client=garmin) is None

    def test_monday_runs_weekly_adherence(self, job_paths, garmin):
        garmin.pull_activities.return_value = [
            {
                "activityId": 7,
                "startTimeLocal": "2026-03-05 07:00:00",
                "activityType": {"typeKey": "running"},
                "duration": 2700.0,
                "distance": 4000.0,
            }
        ]
        morning.morning_job(today=date(2026, 3, 9), client=garmin)

        garmin.pull_activities.assert_called_once_with(date(2026, 3, 2), date(2026, 3, 8))
        report = json.loads((job_paths[2] / "adherence_2026-03-02.json").read_text())
        assert report["completionRate"] == 14
        assert report["summary"].startswith("Completed 14% of planned sessions")

    def test_hike_is_not_counted_as_running(self, job_paths, garmin):
        garmin.pull_activities.return_value = [
            {
                "activityId": 8,
                "startTimeLocal": "2026-03-07 09:00:00",
                "activityType": {"typeKey": "hiking"},
                "duration": 14400.0,
                "distance": 15000.0,
            }
        ]
        morning.morning_job(today=date(2026, 3, 9), client=garmin)

        report = json.loads((job_paths[2] / "adherence_2026-03-02.json").read_text())
        assert report["totalLoadDiff"]["distance_km"] == pytest.approx(-12.0)
        assert report["modified"][0]["planned"]["subtype"] == "active_recovery"
        assert "12.0 km less running than planned" in report["summary"]

    def test_first_monday_has_no_previous_week(self, job_paths, garmin):
        assert morning.weekly_adherence(
            morning.load_plan(job_paths[0]), garmin, date(2026, 3, 2)
        ) is None

    def test_connects_when_no_client_given(self, job_paths):
        job_paths[1].write_text(json.dumps({"score": 75}))
        with patch.object(morning, "GarminClient", side_effect=GarminAuthError("no tokens")):
            path = morning.morning_job(today=date(2026, 3, 3))
        assert json.loads(path.read_text())["status"] == "good"
