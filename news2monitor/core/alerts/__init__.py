"""Alert threshold evaluation."""

from .evaluator import (
    classify,
    default_thresholds,
    is_observation_overdue,
    next_review_at,
    resolve_thresholds,
)

__all__ = [
    "classify",
    "default_thresholds",
    "is_observation_overdue",
    "next_review_at",
    "resolve_thresholds",
]
