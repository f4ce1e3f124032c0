"""High-level orchestrator implementing the score → tier → trend pipeline."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..schemas.alerts import Assessment, News2Alert, RiskTier, TrendOrder
from ..schemas.observation import Observation
from .alerts.evaluator import ThresholdInput, as_utc, classify, is_observation_overdue, next_review_at
from .recommendations import build_recommendations
from .scores import score_breakdown
from .trend.tracker import DEFAULT_WINDOW, classify_trend, detect_rapid_increase, score_delta

__all__ = ["assess", "check_overdue"]

logger = logging.getLogger("news2monitor.assessment")


def _high_score_alert(tier: RiskTier, total: int, label: str, created_at: datetime) -> Optional[News2Alert]:
    if tier is RiskTier.LOW:
        return None
    severity = "critical" if tier is RiskTier.HIGH else "high"
    return News2Alert(
        alert_type="high_score",
        severity=severity,
        message=f"NEWS2 score {total} ({label})",
        score=total,
        created_at=created_at,
    )


def _deterioration_alert(history: List[int], threshold: int, created_at: datetime) -> Optional[News2Alert]:
    if not detect_rapid_increase(history, threshold):
        return None
    delta = score_delta(history)
    return News2Alert(
        alert_type="deteriorating",
        severity="medium",
        message=f"NEWS2 score increased by {delta} since the previous observation",
        score=history[-1],
        created_at=created_at,
    )


def assess(
    observation: Observation,
    thresholds: ThresholdInput = None,
    history: Sequence[int] = (),
    order: TrendOrder = TrendOrder.OLDEST_FIRST,
    window: int = DEFAULT_WINDOW,
) -> Assessment:
    """Score *observation* and place it in the context of the patient's history.

    *history* holds the scores of earlier observations in the given *order*;
    the new score is appended as the most recent entry before the trend is
    classified.
    """

    breakdown = score_breakdown(observation)
    classification = classify(breakdown.total, thresholds)
    resolved = classification.thresholds

    chronological = [int(value) for value in history]
    if TrendOrder(order) is TrendOrder.NEWEST_FIRST:
        chronological.reverse()
    chronological.append(breakdown.total)

    trend = classify_trend(chronological, window=window)
    now = datetime.now(timezone.utc)
    alerts = [
        alert
        for alert in (
            _high_score_alert(classification.tier, breakdown.total, classification.label, now),
            _deterioration_alert(chronological, resolved.rapid_increase_threshold, now),
        )
        if alert is not None
    ]
    notify_channels = resolved.enabled_channels() if resolved.enable_alerts and alerts else []

    logger.info(
        "NEWS2 assessed: score=%s tier=%s trend=%s alerts=%s",
        breakdown.total,
        classification.tier.value,
        trend.value,
        [alert.alert_type for alert in alerts],
    )

    return Assessment(
        observation=observation,
        breakdown=breakdown,
        classification=classification,
        trend=trend,
        score_delta=score_delta(chronological),
        alerts=alerts,
        recommendations=build_recommendations(classification, breakdown, trend),
        next_review_at=next_review_at(observation.recorded_at, classification.tier),
        notify_channels=notify_channels,
    )


def check_overdue(
    last_recorded_at: datetime,
    tier: RiskTier,
    now: Optional[datetime] = None,
) -> Optional[News2Alert]:
    """Return an ``overdue_observation`` alert when the next review has passed."""

    now = as_utc(now or datetime.now(timezone.utc))
    last_recorded_at = as_utc(last_recorded_at)
    tier = RiskTier(tier)
    if not is_observation_overdue(last_recorded_at, tier, now):
        return None
    due = next_review_at(last_recorded_at, tier)
    overdue_minutes = int((now - due).total_seconds() // 60)
    return News2Alert(
        alert_type="overdue_observation",
        severity=tier.value,
        message=f"Observation overdue by {overdue_minutes} minutes ({tier.value} risk schedule)",
        created_at=now,
    )
