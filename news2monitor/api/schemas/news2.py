"""Pydantic schemas for the NEWS2 HTTP endpoints."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ...schemas.alerts import AlertThresholdConfig, News2Alert, RiskTier, Trend, TrendOrder
from ...schemas.observation import Consciousness, Observation


class VitalSignsIn(BaseModel):
    """Observation as submitted by a carer, checked against clinical input ranges."""

    respiratory_rate: int = Field(..., ge=4, le=60)
    oxygen_saturation: int = Field(..., ge=50, le=100)
    supplemental_oxygen: bool = False
    systolic_bp: int = Field(..., ge=40, le=300)
    pulse_rate: int = Field(..., ge=20, le=250)
    consciousness: Consciousness = Consciousness.ALERT
    temperature: float = Field(..., ge=25, le=45)
    recorded_at: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=2000)

    def to_observation(self) -> Observation:
        data = self.model_dump(exclude_none=True)
        data.setdefault("recorded_at", datetime.now(timezone.utc))
        return Observation(**data)


class ClassifyRequest(BaseModel):
    score: int = Field(..., ge=0, le=20)
    thresholds: Optional[Dict[str, Any]] = None


class TrendRequest(BaseModel):
    scores: List[int] = Field(default_factory=list)
    window: Optional[int] = Field(default=None, ge=2)
    order: TrendOrder = TrendOrder.OLDEST_FIRST
    rapid_increase_threshold: Optional[int] = Field(default=None, ge=1)


class TrendResponse(BaseModel):
    trend: Trend
    score_delta: int
    rapid_increase: bool
    observations: int


class AssessRequest(BaseModel):
    observation: VitalSignsIn
    thresholds: Optional[Dict[str, Any]] = None
    history: List[int] = Field(default_factory=list)
    order: TrendOrder = TrendOrder.OLDEST_FIRST


class OverdueRequest(BaseModel):
    last_recorded_at: datetime
    tier: RiskTier
    now: Optional[datetime] = None


class OverdueResponse(BaseModel):
    overdue: bool
    alert: Optional[News2Alert] = None


class ThresholdDefaults(BaseModel):
    thresholds: AlertThresholdConfig
