"""Pydantic schemas shared by the core and the API."""

from .alerts import (
    AlertClassification,
    AlertThresholdConfig,
    Assessment,
    CareRecommendations,
    MonitoringPlan,
    News2Alert,
    RiskTier,
    Trend,
    TrendOrder,
)
from .observation import Consciousness, Observation, ScoreBreakdown

__all__ = [
    "AlertClassification",
    "AlertThresholdConfig",
    "Assessment",
    "CareRecommendations",
    "Consciousness",
    "MonitoringPlan",
    "News2Alert",
    "Observation",
    "RiskTier",
    "ScoreBreakdown",
    "Trend",
    "TrendOrder",
]
