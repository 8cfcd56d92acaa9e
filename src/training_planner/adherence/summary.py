"""Human-readable summary of a weekly adherence report."""

from __future__ import annotations

from training_planner.models.adherence import AdherenceReport
from training_planner.models.enums import DISTANCE_TOLERANCE_KM


def generate_summary(report: AdherenceReport | None) -> str:
    """One-paragraph summary: completion, skipped, extra and distance delta."""
    if report is None:
        return ""

    parts = [f"Completed {report.completion_rate}% of planned sessions"]

    if report.skipped:
        parts.append(f"{len(report.skipped)} sessions skipped")

    if report.extra:
        parts.append(f"{len(report.extra)} extra sessions")

    km = report.load_delta.distance_km
    if abs(km) > DISTANCE_TOLERANCE_KM:
        if km > 0:
            parts.append(f"{km:.1f} km more running than planned")
        else:
            parts.append(f"{abs(km):.1f} km less running than planned")

    return ". ".join(parts)
