"""Readiness input snapshot and the advisory adjustment it produces."""

from __future__ import annotations

from dataclasses import dataclass

from training_planner.models.enums import ReadinessStatus
from training_planner.models.session import Session


@dataclass(frozen=True)
class ReadinessSnapshot:
    """Today's physiological signal from a wearable-metrics source.

    Treated as an opaque, possibly stale reading. ``hrv_ms`` and
    ``resting_hr`` are echoed back in recommendations but do not drive
    the decision.
    """

    score: float  # 0-100 recovery / readiness
    sleep_performance: float | None = None  # 0-100 %
    hrv_ms: float | None = None
    resting_hr: int | None = None

    @property
    def clamped_score(self) -> float:
        return max(0.0, min(100.0, float(self.score)))


@dataclass(frozen=True)
class AdjustmentRecommendation:
    """Output of the readiness adjustment: advisory, never applied here."""

    status: ReadinessStatus
    rationale: str
    should_adjust: bool
    adjustment_factor: float
    readiness: ReadinessSnapshot
    original_session: Session
    alternate_session: Session | None = None
