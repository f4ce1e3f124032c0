"""Helpers to evaluate runtime feature flags."""
from __future__ import annotations

import os

_FLAG_TRUE = {"1", "true", "yes", "on", "enable", "enabled"}

_KNOWN_FLAGS = (
    "NEWS2_METRICS",
    "NEWS2_LOG_ASSESSMENTS",
)


def flag_enabled(name: str) -> bool:
    value = os.getenv(name)
    if value is None:
        return False
    return value.strip().lower() in _FLAG_TRUE


def env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def metrics_capacity() -> int:
    """Return how many metric events the in-memory reservoir keeps."""

    return max(1, env_int("NEWS2_METRICS_CAPACITY", 2000))


def feature_flags_snapshot() -> dict[str, bool]:
    """Expose a snapshot of relevant flags for logging/diagnostics."""

    return {name: flag_enabled(name) for name in _KNOWN_FLAGS}


__all__ = [
    "flag_enabled",
    "env_int",
    "metrics_capacity",
    "feature_flags_snapshot",
]
