"""Morning job: readiness check for today's session, weekly adherence on Mondays.

Usage:
    python -m scheduler.morning --once      # single run (for cron)
    python -m scheduler.morning --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Optional

from garmin_client import (
    GarminClient,
    GarminClientError,
    map_activities,
    map_readiness_snapshot,
)
from training_planner.adherence import compare_actual_vs_planned, generate_summary
from training_planner.exceptions import SerializationError
from training_planner.models import Plan, ReadinessSnapshot, Session, Weekday
from training_planner.readiness import recommend
from training_planner.serialization import (
    plan_from_dict,
    recommendation_to_dict,
    report_to_dict,
    to_json_string,
)

from scheduler.config import (
    GARMIN_EMAIL,
    GARMIN_PASSWORD,
    MORNING_HOUR,
    MORNING_MINUTE,
    OUTPUT_DIR,
    PLAN_PATH,
    READINESS_PATH,
    TOKEN_DIR,
)

logger = logging.getLogger(__name__)


def load_plan(path: Path = PLAN_PATH) -> Plan:
    """Read the persisted plan JSON.

    Raises:
        FileNotFoundError: No plan at *path*.
        SerializationError: The file is not a valid plan.
    """
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"{path} is not valid JSON: {exc}") from exc
    return plan_from_dict(data)


def load_fallback_readiness(path: Path = READINESS_PATH) -> Optional[ReadinessSnapshot]:
    """Manual snapshot ``{"score", "sleep", "hrv", "restingHR"}``, if present."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except json.JSONDecodeError:
        logger.warning("Ignoring malformed readiness file %s", path)
        return None

    if data.get("score") is None:
        return None
    return ReadinessSnapshot(
        score=float(data["score"]),
        sleep_performance=data.get("sleep"),
        hrv_ms=data.get("hrv"),
        resting_hr=data.get("restingHR"),
    )


def session_for_day(plan: Plan, day: date) -> Optional[Session]:
    """The prescribed session on *day*, or None outside the plan."""
    week = plan.week_containing(day)
    if week is None:
        return None
    weekday = Weekday(day.isoweekday())
    for session in week.sessions:
        if session.day == weekday:
            return session
    return None


def connect_garmin() -> Optional[GarminClient]:
    try:
        return GarminClient(
            email=GARMIN_EMAIL,
            password=GARMIN_PASSWORD,
            token_dir=TOKEN_DIR,
        )
    except GarminClientError as exc:
        logger.warning("Garmin unavailable: %s", exc)
        return None


def fetch_readiness(client: Optional[GarminClient], day: date) -> Optional[ReadinessSnapshot]:
    """Garmin readiness for *day*, falling back to the manual snapshot file."""
    if client is not None:
        try:
            snapshot = map_readiness_snapshot(client.pull_daily_metrics(day))
        except GarminClientError as exc:
            logger.warning("Failed to pull readiness: %s", exc)
            snapshot = None
        if snapshot is not None:
            return snapshot
        logger.info("No Garmin readiness for %s, trying %s", day, READINESS_PATH)
    return load_fallback_readiness(READINESS_PATH)


def write_output(name: str, payload: dict[str, Any], output_dir: Optional[Path] = None) -> Path:
    output_dir = output_dir or OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / name
    path.write_text(to_json_string(payload))
    logger.info("Wrote %s", path)
    return path


def weekly_adherence(plan: Plan, client: GarminClient, today: date) -> Optional[Path]:
    """Compare last week's prescription with the activities Garmin logged."""
    week = plan.week_containing(today - timedelta(days=7))
    if week is None:
        logger.info("No plan week before %s, skipping adherence", today)
        return None

    week_end = week.week_start + timedelta(days=6)
    try:
        activities = map_activities(client.pull_activities(week.week_start, week_end))
    except GarminClientError as exc:
        logger.error("Failed to pull activities for week %d: %s", week.week_number, exc)
        return None

    report = compare_actual_vs_planned(week, activities)
    summary = generate_summary(report)
    logger.info("Week %d adherence: %s", week.week_number, summary)

    payload = report_to_dict(report)
    payload["summary"] = summary
    return write_output(f"adherence_{week.week_start.isoformat()}.json", payload)


def morning_job(today: Optional[date] = None, client: Optional[GarminClient] = None) -> Optional[Path]:
    """Execute one morning cycle and return the recommendation file path."""
    today = today or date.today()
    logger.info("Starting morning job for %s", today)

    try:
        plan = load_plan(PLAN_PATH)
    except (FileNotFoundError, SerializationError) as exc:
        logger.error("Cannot load plan from %s: %s", PLAN_PATH, exc)
        return None

    if client is None:
        client = connect_garmin()

    if client is not None and today.isoweekday() == Weekday.MONDAY:
        weekly_adherence(plan, client, today)

    session = session_for_day(plan, today)
    if session is None:
        logger.info("%s is outside plan %s, nothing to adjust", today, plan.plan_id)
        return None

    readiness = fetch_readiness(client, today)
    if readiness is None:
        logger.warning("No readiness data for %s, keeping the plan as is", today)
        return None

    rec = recommend(session, readiness)
    path = write_output(f"recommendation_{today.isoformat()}.json", recommendation_to_dict(rec))
    logger.info("Morning job complete")
    return path


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Training planner morning readiness job")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        morning_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            morning_job,
            "cron",
            hour=MORNING_HOUR,
            minute=MORNING_MINUTE,
            id="morning_job",
        )
        logger.info(
            "Scheduler started, morning job at %02d:%02d",
            MORNING_HOUR,
            MORNING_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
