"""Data models for the training planner."""

from training_planner.models.adherence import (
    AdherenceReport,
    AdherenceTrend,
    BlockSummary,
    Deviation,
    LoadDelta,
    MatchedSession,
    TypeAdherence,
    VolumeAdherence,
)
from training_planner.models.enums import (
    ReadinessStatus,
    SessionType,
    TrainingPhase,
    Weekday,
)
from training_planner.models.goal import Goal, Preferences
from training_planner.models.plan import Plan, PhaseSpec, WeekLoad, WeekPlan
from training_planner.models.readiness import (
    AdjustmentRecommendation,
    ReadinessSnapshot,
)
from training_planner.models.session import Session
from training_planner.models.workout_log import ActualWorkout

__all__ = [
    "ActualWorkout",
    "AdherenceReport",
    "AdherenceTrend",
    "AdjustmentRecommendation",
    "BlockSummary",
    "Deviation",
    "Goal",
    "LoadDelta",
    "MatchedSession",
    "PhaseSpec",
    "Plan",
    "Preferences",
    "ReadinessSnapshot",
    "ReadinessStatus",
    "Session",
    "SessionType",
    "TrainingPhase",
    "TypeAdherence",
    "VolumeAdherence",
    "WeekLoad",
    "WeekPlan",
    "Weekday",
]
