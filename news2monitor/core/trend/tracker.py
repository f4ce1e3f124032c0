"""Score trajectory classification over a patient's observation history."""

from __future__ import annotations

from typing import List, Sequence

from ...schemas.alerts import Trend, TrendOrder

__all__ = ["classify_trend", "detect_rapid_increase", "score_delta"]

DEFAULT_WINDOW = 2
DEFAULT_RAPID_INCREASE = 2


def _chronological(scores: Sequence[int], order: TrendOrder) -> List[int]:
    values = [int(value) for value in scores]
    if TrendOrder(order) is TrendOrder.NEWEST_FIRST:
        values.reverse()
    return values


def classify_trend(
    scores: Sequence[int],
    window: int = DEFAULT_WINDOW,
    order: TrendOrder = TrendOrder.OLDEST_FIRST,
) -> Trend:
    """Classify the most recent movement of a score history.

    The newest score is compared with the mean of the other scores inside the
    last *window* observations. With the default window of two this is a
    strict comparison of the last two observations. Fewer than two scores
    cannot show a trend and are reported as stable.
    """

    values = _chronological(scores, order)
    window = max(DEFAULT_WINDOW, int(window))
    recent = values[-window:]
    if len(recent) < 2:
        return Trend.STABLE
    newest = recent[-1]
    previous = recent[:-1]
    # compare newest * n against the sum to stay in integers
    baseline_total = sum(previous)
    scaled_newest = newest * len(previous)
    if scaled_newest > baseline_total:
        return Trend.RISING
    if scaled_newest < baseline_total:
        return Trend.FALLING
    return Trend.STABLE


def score_delta(scores: Sequence[int], order: TrendOrder = TrendOrder.OLDEST_FIRST) -> int:
    values = _chronological(scores, order)
    if len(values) < 2:
        return 0
    return values[-1] - values[-2]


def detect_rapid_increase(
    scores: Sequence[int],
    threshold: int = DEFAULT_RAPID_INCREASE,
    order: TrendOrder = TrendOrder.OLDEST_FIRST,
) -> bool:
    """True when the latest score rose by at least *threshold* since the previous one."""

    if threshold < 1:
        threshold = DEFAULT_RAPID_INCREASE
    return score_delta(scores, order) >= threshold
