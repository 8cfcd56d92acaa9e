"""Scheduled jobs around the training planner."""
