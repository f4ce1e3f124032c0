"""Trend tracking over score histories."""

from .tracker import classify_trend, detect_rapid_increase, score_delta

__all__ = ["classify_trend", "detect_rapid_increase", "score_delta"]
