"""Tests for garmin_client.client: mock-based, no real network calls."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock, call, patch

import pytest

from garmin_client.client import GarminClient
from garmin_client.exceptions import GarminAPIError, GarminRateLimitError


@pytest.fixture
def mock_garmin():
    mock = MagicMock()
    mock.garth = MagicMock()
    return mock


@pytest.fixture
def client(mock_garmin):
    with patch("garmin_client.client.create_session", return_value=mock_garmin):
        c = GarminClient(email="test@test.com", password="pass")
    return c


def _http_error(status: int) -> Exception:
    exc = Exception(f"HTTP {status}")
    exc.status = status
    return exc


class TestPullDailyMetrics:
    def test_collects_all_endpoints(self, client, mock_garmin):
        mock_garmin.get_training_readiness.return_value = [{"score": 70}]
        mock_garmin.get_sleep_data.return_value = {"dailySleepDTO": {}}
        mock_garmin.get_hrv_data.return_value = {"hrvSummary": {}}
        mock_garmin.get_stats.return_value = {"restingHeartRate": 50}

        result = client.pull_daily_metrics(date(2026, 3, 3))
        assert set(result) == {"training_readiness", "sleep", "hrv", "stats"}
        assert result["training_readiness"] == [{"score": 70}]
        mock_garmin.get_stats.assert_called_once_with("2026-03-03")

    def test_partial_failure_returns_none_for_key(self, client, mock_garmin):
        mock_garmin.get_hrv_data.side_effect = _http_error(500)
        mock_garmin.get_stats.return_value = {"restingHeartRate": 50}

        result = client.pull_daily_metrics(date(2026, 3, 3))
        assert result["hrv"] is None
        assert result["stats"] == {"restingHeartRate": 50}


class TestPullActivities:
    def test_passes_iso_range(self, client, mock_garmin):
        mock_garmin.get_activities_by_date.return_value = [{"activityId": 1}]
        result = client.pull_activities(date(2026, 3, 2), date(2026, 3, 8))
        assert result == [{"activityId": 1}]
        mock_garmin.get_activities_by_date.assert_called_once_with("2026-03-02", "2026-03-08")

    def test_activity_type_filter(self, client, mock_garmin):
        mock_garmin.get_activities_by_date.return_value = []
        client.pull_activities(date(2026, 3, 2), date(2026, 3, 8), "running")
        mock_garmin.get_activities_by_date.assert_called_once_with(
            "2026-03-02", "2026-03-08", "running"
        )

    def test_none_response_is_empty(self, client, mock_garmin):
        mock_garmin.get_activities_by_date.return_value = None
        assert client.pull_activities(date(2026, 3, 2), date(2026, 3, 8)) == []

    def test_error_propagates(self, client, mock_garmin):
        mock_garmin.get_activities_by_date.side_effect = _http_error(503)
        with pytest.raises(GarminAPIError) as excinfo:
            client.pull_activities(date(2026, 3, 2), date(2026, 3, 8))
        assert excinfo.value.status_code == 503
        assert excinfo.value.endpoint == "activities"


class TestSafeCall:
    @patch("garmin_client.client.time.sleep")
    def test_retries_on_429(self, mock_sleep, client):
        fn = MagicMock(side_effect=[_http_error(429), "ok"])
        assert client._safe_call("sleep", fn, "x") == "ok"
        assert fn.call_count == 2
        mock_sleep.assert_called_once_with(2)

    @patch("garmin_client.client.time.sleep")
    def test_gives_up_after_retries(self, mock_sleep, client):
        fn = MagicMock(side_effect=_http_error(429))
        with pytest.raises(GarminRateLimitError) as excinfo:
            client._safe_call("stats", fn)
        assert excinfo.value.endpoint == "stats"
        assert excinfo.value.attempts == 3
        assert excinfo.value.status_code == 429
        assert fn.call_count == 3
        assert mock_sleep.call_args_list == [call(2), call(4), call(8)]

    def test_non_retryable_wrapped(self, client):
        fn = MagicMock(side_effect=ValueError("bad json"))
        with pytest.raises(GarminAPIError, match="hrv: bad json"):
            client._safe_call("hrv", fn)
        assert fn.call_count == 1


def test_from_garmin_wraps_session(mock_garmin):
    client = GarminClient.from_garmin(mock_garmin)
    mock_garmin.get_activities_by_date.return_value = []
    assert client.pull_activities(date(2026, 3, 2), date(2026, 3, 8)) == []
