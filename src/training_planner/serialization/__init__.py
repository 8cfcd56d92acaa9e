"""Serialization module: plans, reports and recommendations as JSON dicts."""

from training_planner.serialization.plan_json import (
    plan_from_dict,
    plan_to_dict,
    recommendation_to_dict,
    report_to_dict,
    to_json_string,
    workout_from_dict,
)

__all__ = [
    "plan_from_dict",
    "plan_to_dict",
    "recommendation_to_dict",
    "report_to_dict",
    "to_json_string",
    "workout_from_dict",
]
