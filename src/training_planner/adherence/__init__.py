"""Adherence analysis: planned vs actual training."""

from training_planner.adherence.analyzer import compare_actual_vs_planned
from training_planner.adherence.equivalence import EQUIVALENCE_CLASSES, equivalence_class
from training_planner.adherence.summary import generate_summary

__all__ = [
    "EQUIVALENCE_CLASSES",
    "compare_actual_vs_planned",
    "equivalence_class",
    "generate_summary",
]
