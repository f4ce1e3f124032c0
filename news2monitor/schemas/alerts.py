"""Schemas for threshold configuration, risk tiers, trends and alerts."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import StrictModel
from .observation import Observation, ScoreBreakdown


class RiskTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Trend(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class TrendOrder(str, Enum):
    """Direction in which a score history is supplied."""

    OLDEST_FIRST = "oldest_first"
    NEWEST_FIRST = "newest_first"


AlertType = Literal["high_score", "deteriorating", "overdue_observation"]
AlertSeverity = Literal["low", "medium", "high", "critical"]


class AlertThresholdConfig(BaseModel):
    """Per-patient alert settings maintained by clinical staff."""

    model_config = ConfigDict(extra="ignore")

    enable_alerts: bool = True
    increased_monitoring_threshold: int = Field(default=5, ge=0)
    emergency_care_threshold: int = Field(default=7, ge=0)
    rapid_increase_threshold: int = Field(default=2, ge=1)
    notify_email: bool = True
    notify_push: bool = True
    dashboard_flag: bool = True

    def enabled_channels(self) -> List[str]:
        channels = []
        if self.notify_email:
            channels.append("email")
        if self.notify_push:
            channels.append("push")
        if self.dashboard_flag:
            channels.append("dashboard")
        return channels


class AlertClassification(StrictModel):
    tier: RiskTier
    label: str
    score: int
    action_text: str
    monitoring_frequency: str
    review_interval_minutes: int
    thresholds: AlertThresholdConfig
    should_notify: bool


class News2Alert(StrictModel):
    alert_type: AlertType
    severity: AlertSeverity
    message: str
    score: Optional[int] = None
    created_at: datetime


class MonitoringPlan(StrictModel):
    frequency: str
    focus_areas: List[str]


class CareRecommendations(StrictModel):
    immediate_actions: List[str]
    monitoring_plan: MonitoringPlan
    care_suggestions: List[str]
    escalation_criteria: List[str]
    clinical_reasoning: str
    source: str


class Assessment(StrictModel):
    observation: Observation
    breakdown: ScoreBreakdown
    classification: AlertClassification
    trend: Trend
    score_delta: int
    alerts: List[News2Alert]
    recommendations: CareRecommendations
    next_review_at: datetime
    notify_channels: List[str]
