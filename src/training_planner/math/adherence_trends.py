"""Block-level adherence analytics over several weekly reports.

Weekly reports answer "did I do this week's plan"; these functions answer
"how is the block going": running volume against the plan, which session
categories keep getting skipped, and whether completion is improving.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from training_planner.math.periodization import round_half_up
from training_planner.models.adherence import (
    AdherenceReport,
    AdherenceTrend,
    BlockSummary,
    TypeAdherence,
    VolumeAdherence,
)
from training_planner.models.enums import (
    TREND_CHANGE_THRESHOLD_PCT,
    VOLUME_GOOD_BAND,
    VOLUME_PERFECT_BAND,
    WEAK_AREA_MAX_PCT,
    WEAK_AREA_MIN_PLANNED,
)
from training_planner.models.plan import WeekPlan


def _percent(part: float, whole: float) -> int:
    """Half-up integer percentage; 0 when *whole* is 0."""
    if whole <= 0:
        return 0
    return int(np.floor(part * 100.0 / whole + 0.5))


def classify_volume(percentage: int) -> str:
    """Band a completed/planned volume percentage."""
    if VOLUME_PERFECT_BAND[0] <= percentage <= VOLUME_PERFECT_BAND[1]:
        return "perfect"
    if VOLUME_GOOD_BAND[0] <= percentage <= VOLUME_GOOD_BAND[1]:
        return "good"
    if percentage < VOLUME_GOOD_BAND[0]:
        return "under"
    return "over"


def volume_adherence(
    reports: Sequence[AdherenceReport], weeks: Sequence[WeekPlan]
) -> VolumeAdherence:
    """Planned vs completed running distance for the weeks that have a report.

    Completed distance per week is the planned distance plus the report's
    distance delta. Weeks without a report and reports without a matching
    week are ignored.

    Args:
        reports: Weekly adherence reports.
        weeks: The prescribed weeks (matched to reports on ``week_start``).

    Returns:
        VolumeAdherence with distances rounded to 0.1 km.
    """
    planned = pd.DataFrame(
        {
            "week_start": [w.week_start for w in weeks],
            "planned_km": [w.load.distance_km for w in weeks],
        },
        columns=["week_start", "planned_km"],
    )
    deltas = pd.DataFrame(
        {
            "week_start": [r.week_start for r in reports],
            "delta_km": [r.load_delta.distance_km for r in reports],
        },
        columns=["week_start", "delta_km"],
    )
    merged = planned.merge(deltas, on="week_start", how="inner")

    planned_km = float(merged["planned_km"].sum()) if not merged.empty else 0.0
    completed_km = (
        float((merged["planned_km"] + merged["delta_km"]).clip(lower=0.0).sum())
        if not merged.empty
        else 0.0
    )
    percentage = _percent(completed_km, planned_km)

    return VolumeAdherence(
        planned_km=round_half_up(planned_km, 1),
        completed_km=round_half_up(completed_km, 1),
        percentage=percentage,
        band=classify_volume(percentage),
    )


def session_type_distribution(
    reports: Sequence[AdherenceReport],
) -> tuple[TypeAdherence, ...]:
    """Per-subtype planned and completed counts, most-planned first.

    A modified session counts as completed. Ties keep first-seen order.
    """
    rows = []
    for report in reports:
        rows.extend((p.planned.subtype, True) for p in report.completed)
        rows.extend((p.planned.subtype, True) for p in report.modified)
        rows.extend((s.subtype, False) for s in report.skipped)
    if not rows:
        return ()

    df = pd.DataFrame(rows, columns=["category", "done"])
    grouped = (
        df.groupby("category", sort=False)["done"]
        .agg(planned="count", completed="sum")
        .reset_index()
        .sort_values("planned", ascending=False, kind="mergesort")
    )

    return tuple(
        TypeAdherence(
            category=str(row.category),
            planned=int(row.planned),
            completed=int(row.completed),
            percentage=_percent(row.completed, row.planned),
        )
        for row in grouped.itertuples(index=False)
    )


def find_weak_areas(
    distribution: Sequence[TypeAdherence],
) -> tuple[TypeAdherence, ...]:
    """Categories completed under 70 % with at least 3 planned, worst first."""
    weak = [
        d
        for d in distribution
        if d.percentage < WEAK_AREA_MAX_PCT and d.planned >= WEAK_AREA_MIN_PLANNED
    ]
    return tuple(sorted(weak, key=lambda d: d.percentage))


def _completion(reports: Sequence[AdherenceReport]) -> int:
    done = sum(len(r.completed) + len(r.modified) for r in reports)
    total = sum(r.total_prescribed for r in reports)
    return _percent(done, total)


def adherence_trend(reports: Sequence[AdherenceReport]) -> AdherenceTrend:
    """Compare completion of the first and second half of the block.

    Reports are ordered by week start; with an odd count the middle week
    belongs to the second half. A change of more than 10 points either way
    is a trend.
    """
    if len(reports) < 2:
        return AdherenceTrend(direction="insufficient_data")

    ordered = sorted(reports, key=lambda r: r.week_start)
    midpoint = len(ordered) // 2
    first = _completion(ordered[:midpoint])
    second = _completion(ordered[midpoint:])
    change = second - first

    if change > TREND_CHANGE_THRESHOLD_PCT:
        direction = "improving"
    elif change < -TREND_CHANGE_THRESHOLD_PCT:
        direction = "declining"
    else:
        direction = "stable"

    return AdherenceTrend(
        direction=direction,
        change=change,
        first_half_pct=first,
        second_half_pct=second,
    )


def block_summary(
    reports: Sequence[AdherenceReport], weeks: Sequence[WeekPlan]
) -> BlockSummary:
    """Bundle volume, distribution, weak areas and trend for a block."""
    distribution = session_type_distribution(reports)
    return BlockSummary(
        weeks_analyzed=len(reports),
        completion_rate=_completion(reports),
        volume=volume_adherence(reports, weeks),
        distribution=distribution,
        weak_areas=find_weak_areas(distribution),
        trend=adherence_trend(reports),
    )
