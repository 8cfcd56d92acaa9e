"""Environment-variable-based configuration for the morning readiness job."""

from __future__ import annotations

import os
from pathlib import Path

GARMIN_EMAIL: str = os.environ.get("GARMIN_EMAIL", "")
GARMIN_PASSWORD: str = os.environ.get("GARMIN_PASSWORD", "")
TOKEN_DIR: Path = Path(os.environ.get("GARMIN_TOKEN_DIR", "~/.garminconnect")).expanduser()
MORNING_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "6"))
MORNING_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "30"))
PLAN_PATH: Path = Path(os.environ.get("PLAN_PATH", "data/plan.json"))
# Manual readiness snapshot used when Garmin has no score for today
READINESS_PATH: Path = Path(os.environ.get("READINESS_PATH", "data/readiness.json"))
OUTPUT_DIR: Path = Path(os.environ.get("OUTPUT_DIR", "data/out"))
