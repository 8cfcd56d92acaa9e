"""JSON serialization for plans, reports and recommendations.

Converts engine dataclasses to JSON-compatible dicts for the persistence
collaborator, and restores plans and logged workouts from the same shapes.
Enums are written as lower-case labels and dates as ISO strings.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from training_planner.exceptions import SerializationError
from training_planner.models.adherence import AdherenceReport, MatchedSession
from training_planner.models.enums import SessionType, TrainingPhase, Weekday
from training_planner.models.goal import Goal
from training_planner.models.plan import Plan, PhaseSpec, WeekLoad, WeekPlan
from training_planner.models.readiness import AdjustmentRecommendation
from training_planner.models.session import Session
from training_planner.models.workout_log import ActualWorkout


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Accept full timestamps too ("2026-03-02T07:15:00Z")
    return date.fromisoformat(str(value)[:10])


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def session_to_dict(session: Session) -> dict[str, Any]:
    return {
        "day": session.day.label,
        "type": session.session_type.label,
        "subtype": session.subtype,
        "title": session.title,
        "description": session.description,
        "duration_minutes": session.duration_min,
        "details": dict(session.details),
        "week_number": session.week_number,
        "phase": session.phase.label,
        "is_deload": session.is_deload,
    }


def week_to_dict(week: WeekPlan) -> dict[str, Any]:
    return {
        "weekNumber": week.week_number,
        "weekStart": week.week_start.isoformat(),
        "phase": week.phase.label,
        "isDeload": week.is_deload,
        "focus": week.focus,
        "totalLoad": {
            "distance_km": week.load.distance_km,
            "strength_sessions": week.load.strength_sessions,
            "estimated_hours": week.load.estimated_hours,
        },
        "sessions": [session_to_dict(s) for s in week.sessions],
    }


def goal_to_dict(goal: Goal) -> dict[str, Any]:
    return {
        "raceName": goal.race_name,
        "raceDate": _iso(goal.target_date),
        "raceDistanceKm": goal.target_distance_km,
        "raceVertM": goal.target_elevation_m,
        "totalWeeks": goal.total_weeks,
    }


def phase_to_dict(spec: PhaseSpec) -> dict[str, Any]:
    return {
        "name": spec.phase.label,
        "duration": spec.duration_weeks,
        "startWeek": spec.start_week,
        "endWeek": spec.end_week,
    }


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    """Convert a Plan to a JSON-compatible dict."""
    return {
        "planId": plan.plan_id,
        "createdAt": plan.created_at.isoformat(),
        "goal": goal_to_dict(plan.goal),
        "phases": [phase_to_dict(p) for p in plan.phases],
        "weeks": [week_to_dict(w) for w in plan.weeks],
        "overallStrategy": plan.overall_strategy,
    }


def workout_to_dict(workout: ActualWorkout) -> dict[str, Any]:
    return {
        "id": workout.workout_id,
        "date": workout.date.isoformat(),
        "type": workout.discipline,
        "duration": workout.duration_min,
        "distance_km": workout.distance_km,
        "rpe": workout.effort,
    }


def _matched_to_dict(pair: MatchedSession) -> dict[str, Any]:
    return {
        "planned": session_to_dict(pair.planned),
        "actual": workout_to_dict(pair.actual),
        "differences": {
            "duration": pair.deviation.duration_min,
            "distance": pair.deviation.distance_km,
            "intensity": pair.deviation.intensity,
            "notes": list(pair.deviation.notes),
            "isSignificant": pair.deviation.is_significant,
        },
    }


def report_to_dict(report: AdherenceReport) -> dict[str, Any]:
    """Convert an AdherenceReport to a JSON-compatible dict."""
    return {
        "weekStart": report.week_start.isoformat(),
        "completed": [_matched_to_dict(p) for p in report.completed],
        "modified": [_matched_to_dict(p) for p in report.modified],
        "skipped": [session_to_dict(s) for s in report.skipped],
        "extra": [workout_to_dict(w) for w in report.extra],
        "totalLoadDiff": {
            "distance_km": report.load_delta.distance_km,
            "strengthSessions": report.load_delta.strength_sessions,
            "totalMinutes": report.load_delta.total_minutes,
        },
        "completionRate": report.completion_rate,
    }


def recommendation_to_dict(rec: AdjustmentRecommendation) -> dict[str, Any]:
    """Convert an AdjustmentRecommendation to a JSON-compatible dict."""
    alternate = rec.alternate_session
    return {
        "status": rec.status.label,
        "recommendation": rec.rationale,
        "shouldAdjust": rec.should_adjust,
        "adjustmentFactor": rec.adjustment_factor,
        "readiness": rec.readiness.score,
        "metrics": {
            "recovery": rec.readiness.score,
            "sleep": rec.readiness.sleep_performance,
            "hrv": rec.readiness.hrv_ms,
            "restingHR": rec.readiness.resting_hr,
        },
        "originalWorkout": session_to_dict(rec.original_session),
        "adjustedWorkout": session_to_dict(alternate) if alternate is not None else None,
    }


def to_json_string(payload: dict[str, Any], indent: int | None = 2) -> str:
    """Serialize an already-converted dict to a JSON string."""
    return json.dumps(payload, indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def session_from_dict(data: dict[str, Any]) -> Session:
    return Session(
        day=Weekday[data["day"].upper()],
        session_type=SessionType[data["type"].upper()],
        subtype=data.get("subtype", ""),
        title=data.get("title", ""),
        description=data.get("description", ""),
        duration_min=int(data.get("duration_minutes") or 0),
        details=dict(data.get("details") or {}),
        week_number=int(data.get("week_number", 1)),
        phase=TrainingPhase.from_label(data.get("phase", "base")),
        is_deload=bool(data.get("is_deload", False)),
    )


def week_from_dict(data: dict[str, Any]) -> WeekPlan:
    load = data.get("totalLoad") or {}
    return WeekPlan(
        week_number=int(data["weekNumber"]),
        week_start=_parse_date(data["weekStart"]),  # type: ignore[arg-type]
        phase=TrainingPhase.from_label(data["phase"]),
        is_deload=bool(data.get("isDeload", False)),
        focus=data.get("focus", ""),
        load=WeekLoad(
            distance_km=float(load.get("distance_km", 0.0)),
            strength_sessions=int(load.get("strength_sessions", 0)),
            estimated_hours=float(load.get("estimated_hours", 0.0)),
        ),
        sessions=tuple(session_from_dict(s) for s in data.get("sessions", [])),
    )


def plan_from_dict(data: dict[str, Any]) -> Plan:
    """Restore a Plan written by plan_to_dict().

    Raises:
        SerializationError: If required keys are missing or malformed.
    """
    try:
        goal_data = data.get("goal") or {}
        goal = Goal(
            race_name=goal_data.get("raceName"),
            target_distance_km=goal_data.get("raceDistanceKm"),
            target_elevation_m=goal_data.get("raceVertM"),
            target_date=_parse_date(goal_data.get("raceDate")),
            total_weeks=goal_data.get("totalWeeks"),
        )
        phases = tuple(
            PhaseSpec(
                phase=TrainingPhase.from_label(p["name"]),
                start_week=int(p["startWeek"]),
                end_week=int(p["endWeek"]),
                duration_weeks=int(p["duration"]),
            )
            for p in data["phases"]
        )
        return Plan(
            plan_id=data["planId"],
            created_at=datetime.fromisoformat(data["createdAt"]),
            goal=goal,
            phases=phases,
            weeks=tuple(week_from_dict(w) for w in data["weeks"]),
            overall_strategy=data.get("overallStrategy", ""),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise SerializationError(f"Malformed plan payload: {exc}") from exc


def workout_from_dict(data: dict[str, Any]) -> ActualWorkout:
    """Restore a logged workout.

    Accepts the flat shape written by workout_to_dict() and the nested
    ``running.distance`` shape used by the logging UI.

    Raises:
        SerializationError: If the date or type is missing or malformed.
    """
    try:
        distance = data.get("distance_km")
        if distance is None and isinstance(data.get("running"), dict):
            distance = data["running"].get("distance")
        return ActualWorkout(
            date=_parse_date(data["date"]),  # type: ignore[arg-type]
            discipline=str(data["type"]),
            duration_min=_optional_float(data.get("duration")),
            distance_km=_optional_float(distance),
            effort=_optional_float(data.get("rpe")),
            workout_id=data.get("id"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed workout payload: {exc}") from exc


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)
