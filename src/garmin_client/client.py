"""Read-only Garmin Connect facade for readiness metrics and activities.

Every call goes through ``_safe_call`` which retries HTTP 429 with
exponential backoff and wraps anything else in GarminAPIError.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from garminconnect import Garmin

from garmin_client.auth import DEFAULT_TOKEN_DIR, create_session
from garmin_client.exceptions import GarminAPIError, GarminRateLimitError

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2


class GarminClient:
    """Pulls the daily readiness inputs and logged activities."""

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        token_dir: Path | str = DEFAULT_TOKEN_DIR,
        prompt_mfa: Optional[Callable[[], str]] = None,
    ) -> None:
        self._garmin = create_session(
            email=email or "",
            password=password or "",
            token_dir=token_dir,
            prompt_mfa=prompt_mfa,
        )

    @classmethod
    def from_garmin(cls, garmin: Garmin) -> "GarminClient":
        """Wrap an already-authenticated session."""
        obj = cls.__new__(cls)
        obj._garmin = garmin
        return obj

    def pull_daily_metrics(self, cdate: date) -> dict[str, Any]:
        """Raw readiness inputs for one day.

        Keys: training_readiness, sleep, hrv, stats. A failing endpoint
        yields None for its key; the remaining keys are still filled.
        """
        date_str = cdate.isoformat()
        endpoints: dict[str, Callable[[str], Any]] = {
            "training_readiness": self._garmin.get_training_readiness,
            "sleep": self._garmin.get_sleep_data,
            "hrv": self._garmin.get_hrv_data,
            "stats": self._garmin.get_stats,
        }

        result: dict[str, Any] = {}
        for key, fn in endpoints.items():
            try:
                result[key] = self._safe_call(key, fn, date_str)
            except GarminAPIError as exc:
                logger.warning("Failed to pull %s for %s: %s", exc.endpoint, date_str, exc)
                result[key] = None
        return result

    def pull_activities(
        self, start: date, end: date, activity_type: str | None = None
    ) -> list[dict[str, Any]]:
        """Raw activity summaries between *start* and *end* inclusive.

        Raises:
            GarminAPIError: The endpoint failed.
            GarminRateLimitError: Still throttled after all retries.
        """
        args: list[Any] = [start.isoformat(), end.isoformat()]
        if activity_type:
            args.append(activity_type)
        activities = self._safe_call(
            "activities", self._garmin.get_activities_by_date, *args
        )
        logger.info(
            "Pulled %d activities for %s..%s", len(activities or []), start, end
        )
        return list(activities or [])

    def _safe_call(
        self, endpoint: str, fn: Callable, *args: Any, **kwargs: Any
    ) -> Any:
        for attempt in range(_MAX_RETRIES):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                status = getattr(exc, "status", None) or getattr(
                    exc, "status_code", None
                )
                if status != 429:
                    raise GarminAPIError(
                        str(exc), status_code=status, endpoint=endpoint
                    ) from exc
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Rate limited on %s (attempt %d/%d), retrying in %ds",
                    endpoint,
                    attempt + 1,
                    _MAX_RETRIES,
                    wait,
                )
                time.sleep(wait)

        raise GarminRateLimitError(endpoint, attempts=_MAX_RETRIES)
