"""Readiness-driven single-day adjustment."""

from training_planner.readiness.adjustment import classify_readiness, recommend

__all__ = ["classify_readiness", "recommend"]
