"""Readiness-driven adjustment of a single day's prescription.

A 0-100 recovery score is classified into five tiers, each with a fixed
volume multiplier:

    critical  (< 33)   0.3   replace the session with rest
    warning   (< 50)   0.6   scale the session down
    moderate  (< 67)   0.85  advisory only
    good      (67-84)  1.0
    prime     (>= 85)  1.0

Poor sleep (performance < 60 %) multiplies the factor by a further 0.85 and
forces an adjustment whatever the tier. The result is a recommendation the
athlete confirms; nothing here touches stored plans.
"""

from __future__ import annotations

import copy
import dataclasses
import logging

from training_planner.math.periodization import round_half_up
from training_planner.models.enums import (
    READINESS_CRITICAL_THRESHOLD,
    READINESS_MODERATE_THRESHOLD,
    READINESS_PRIME_THRESHOLD,
    READINESS_VOLUME_FACTOR,
    READINESS_WARNING_THRESHOLD,
    SLEEP_PENALTY_FACTOR,
    SLEEP_PENALTY_THRESHOLD,
    ReadinessStatus,
    SessionType,
)
from training_planner.models.readiness import AdjustmentRecommendation, ReadinessSnapshot
from training_planner.models.session import Session

logger = logging.getLogger(__name__)

ADJUSTED_TITLE_PREFIX = "[Adjusted] "

_RATIONALE: dict[ReadinessStatus, str] = {
    ReadinessStatus.CRITICAL: (
        "Your body needs rest. Take a full rest day or light mobility."
    ),
    ReadinessStatus.WARNING: "Reduced recovery. Go easier than planned today.",
    ReadinessStatus.MODERATE: "OK recovery. Follow the plan, but listen to your body.",
    ReadinessStatus.GOOD: "Good recovery. Train as planned.",
    ReadinessStatus.PRIME: "Peak recovery! This is the day to push.",
}

SLEEP_CAUTION = "Poor sleep, take extra care."

CRITICAL_REST_TITLE = "Rest day (readiness)"
CRITICAL_REST_DESCRIPTION = (
    "Your recovery score is critically low. Today, rest is the best training."
)
CRITICAL_REST_REASON = "Critically low recovery score"


def classify_readiness(score: float) -> ReadinessStatus:
    """Map a 0-100 readiness score onto a ReadinessStatus."""
    if score < READINESS_CRITICAL_THRESHOLD:
        return ReadinessStatus.CRITICAL
    if score < READINESS_WARNING_THRESHOLD:
        return ReadinessStatus.WARNING
    if score < READINESS_MODERATE_THRESHOLD:
        return ReadinessStatus.MODERATE
    if score >= READINESS_PRIME_THRESHOLD:
        return ReadinessStatus.PRIME
    return ReadinessStatus.GOOD


def has_sleep_penalty(readiness: ReadinessSnapshot) -> bool:
    sleep = readiness.sleep_performance
    return sleep is not None and sleep < SLEEP_PENALTY_THRESHOLD


def rest_replacement(session: Session, reason: str = CRITICAL_REST_REASON) -> Session:
    """Explicit rest day for the same slot, discarding the original structure."""
    return Session(
        day=session.day,
        session_type=SessionType.REST,
        subtype="rest",
        title=CRITICAL_REST_TITLE,
        description=CRITICAL_REST_DESCRIPTION,
        duration_min=0,
        details={"intensity_zone": 0, "reason": reason},
        week_number=session.week_number,
        phase=session.phase,
        is_deload=session.is_deload,
    )


def scale_session(session: Session, factor: float, reason: str) -> Session:
    """Scale duration and distance by *factor* and mark the title as adjusted.

    Description and all other detail fields are preserved; details are
    deep-copied so the alternate shares nothing mutable with the original.
    """
    details = copy.deepcopy(session.details)
    if details.get("distance_km"):
        details["distance_km"] = round_half_up(details["distance_km"] * factor, 1)
    details["reason"] = reason
    return dataclasses.replace(
        session,
        title=f"{ADJUSTED_TITLE_PREFIX}{session.title}",
        duration_min=int(round_half_up(session.duration_min * factor)),
        details=details,
    )


def recommend(session: Session, readiness: ReadinessSnapshot) -> AdjustmentRecommendation:
    """Recommend keeping or modifying *session* given today's readiness.

    Args:
        session: Today's prescribed session.
        readiness: Today's readiness snapshot (score is clamped to 0-100).

    Returns:
        AdjustmentRecommendation. ``alternate_session`` is only set when
        an adjustment is due and the session is not already a rest day.
    """
    status = classify_readiness(readiness.clamped_score)
    factor = READINESS_VOLUME_FACTOR[status]
    rationale = _RATIONALE[status]
    should_adjust = status in (ReadinessStatus.CRITICAL, ReadinessStatus.WARNING)

    if has_sleep_penalty(readiness):
        factor *= SLEEP_PENALTY_FACTOR
        rationale = f"{rationale} {SLEEP_CAUTION}"
        should_adjust = True

    alternate: Session | None = None
    if should_adjust and not session.is_rest:
        if status == ReadinessStatus.CRITICAL:
            alternate = rest_replacement(session)
        else:
            alternate = scale_session(session, factor, rationale)

    logger.info(
        "Readiness %.0f -> %s (factor %.2f, adjust=%s) for %s",
        readiness.clamped_score,
        status.label,
        factor,
        should_adjust,
        session.title,
    )
    return AdjustmentRecommendation(
        status=status,
        rationale=rationale,
        should_adjust=should_adjust,
        adjustment_factor=factor,
        readiness=readiness,
        original_session=session,
        alternate_session=alternate,
    )
