"""Risk tier classification against per-patient alert thresholds."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Union

from ...content import load_pack
from ...schemas.alerts import AlertClassification, AlertThresholdConfig, RiskTier

__all__ = [
    "ThresholdInput",
    "as_utc",
    "classify",
    "default_thresholds",
    "is_observation_overdue",
    "next_review_at",
    "resolve_thresholds",
]

logger = logging.getLogger("news2monitor.alerts")

ThresholdInput = Union[AlertThresholdConfig, Mapping[str, Any], None]

_FIELD_ALIASES: Dict[str, tuple[str, ...]] = {
    "enable_alerts": ("enable_alerts", "enableAlerts"),
    "increased_monitoring_threshold": ("increased_monitoring_threshold", "increasedMonitoringThreshold"),
    "emergency_care_threshold": ("emergency_care_threshold", "emergencyCareThreshold"),
    "rapid_increase_threshold": ("rapid_increase_threshold", "rapidIncreaseThreshold"),
    "notify_email": ("notify_email", "notifyEmail", "email"),
    "notify_push": ("notify_push", "notifyPush", "push"),
    "dashboard_flag": ("dashboard_flag", "dashboardFlag", "dashboard"),
}


def default_thresholds() -> Dict[str, int]:
    values = load_pack().get("thresholds", {})
    return {
        "increased_monitoring_threshold": int(values.get("increased_monitoring", 5)),
        "emergency_care_threshold": int(values.get("emergency_care", 7)),
        "rapid_increase_threshold": int(values.get("rapid_increase", 2)),
    }


def _lookup(data: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if key in data:
            return data[key]
    return None


def _as_threshold(value: Any, minimum: int) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    if number < minimum:
        return None
    return number


def _as_flag(field: str, value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    logger.warning("Invalid %s=%r; using default %s", field, value, default)
    return default


def resolve_thresholds(config: ThresholdInput = None) -> AlertThresholdConfig:
    """Return a usable threshold configuration, substituting defaults.

    Missing or invalid thresholds fall back to the pack defaults one by one;
    an inverted monitoring/emergency pair falls back to both defaults.
    """

    defaults = default_thresholds()
    if config is None:
        return AlertThresholdConfig(**defaults)
    if isinstance(config, AlertThresholdConfig):
        data: Mapping[str, Any] = config.model_dump()
    elif isinstance(config, Mapping):
        data = config
    else:
        logger.warning("Unsupported threshold config %r; using defaults", type(config).__name__)
        return AlertThresholdConfig(**defaults)

    resolved: Dict[str, Any] = {}
    for field, default in defaults.items():
        minimum = 1 if field == "rapid_increase_threshold" else 0
        raw = _lookup(data, field)
        value = _as_threshold(raw, minimum)
        if value is None:
            if raw is not None:
                logger.warning("Invalid %s=%r; using default %s", field, raw, default)
            value = default
        resolved[field] = value

    if resolved["increased_monitoring_threshold"] > resolved["emergency_care_threshold"]:
        logger.warning(
            "Increased monitoring threshold %s above emergency threshold %s; using defaults",
            resolved["increased_monitoring_threshold"],
            resolved["emergency_care_threshold"],
        )
        resolved["increased_monitoring_threshold"] = defaults["increased_monitoring_threshold"]
        resolved["emergency_care_threshold"] = defaults["emergency_care_threshold"]

    for field in ("enable_alerts", "notify_email", "notify_push", "dashboard_flag"):
        resolved[field] = _as_flag(field, _lookup(data, field), True)
    return AlertThresholdConfig(**resolved)


def _tier_for(score: int, thresholds: AlertThresholdConfig) -> RiskTier:
    if score >= thresholds.emergency_care_threshold:
        return RiskTier.HIGH
    if score >= thresholds.increased_monitoring_threshold:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def classify(score: int, thresholds: ThresholdInput = None) -> AlertClassification:
    """Classify *score* into a risk tier with the recommended clinical response."""

    resolved = resolve_thresholds(thresholds)
    tier = _tier_for(score, resolved)
    tier_info = load_pack()["tiers"][tier.value]
    return AlertClassification(
        tier=tier,
        label=tier_info["label"],
        score=score,
        action_text=tier_info["action_text"],
        monitoring_frequency=tier_info["monitoring_frequency"],
        review_interval_minutes=int(tier_info["review_interval_minutes"]),
        thresholds=resolved,
        should_notify=resolved.enable_alerts and tier is not RiskTier.LOW,
    )


def _review_interval(tier: RiskTier) -> timedelta:
    minutes = load_pack()["tiers"][RiskTier(tier).value]["review_interval_minutes"]
    return timedelta(minutes=int(minutes))


def next_review_at(recorded_at: datetime, tier: RiskTier) -> datetime:
    """Return when the next observation is due after one taken at *recorded_at*."""

    return recorded_at + _review_interval(tier)


def as_utc(moment: datetime) -> datetime:
    """Read naive datetimes as UTC so they compare with aware ones."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def is_observation_overdue(last_recorded_at: datetime, tier: RiskTier, now: datetime) -> bool:
    return as_utc(now) > next_review_at(as_utc(last_recorded_at), tier)
