"""API endpoints for NEWS2 scoring, classification and trends."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ...core.alerts import resolve_thresholds
from ...core.normalizer import VitalsNormalizationError, build_observation
from ...core.orchestrator import check_overdue
from ...core.scores import score_breakdown
from ...schemas.alerts import AlertClassification, Assessment
from ...schemas.observation import Observation, ScoreBreakdown
from ..schemas.news2 import (
    AssessRequest,
    ClassifyRequest,
    OverdueRequest,
    OverdueResponse,
    ThresholdDefaults,
    TrendRequest,
    TrendResponse,
    VitalSignsIn,
)
from ..services.assessment_service import HistoryTooLongError, assessment_service

router = APIRouter(prefix="/api/news2", tags=["news2"])


@router.post("/score", response_model=ScoreBreakdown)
async def score_observation(payload: VitalSignsIn) -> ScoreBreakdown:
    return score_breakdown(payload.to_observation())


@router.post("/classify", response_model=AlertClassification)
async def classify_score(payload: ClassifyRequest) -> AlertClassification:
    return assessment_service.classify(payload.score, payload.thresholds)


@router.post("/trend", response_model=TrendResponse)
async def classify_history(payload: TrendRequest) -> TrendResponse:
    try:
        return assessment_service.trend(
            payload.scores,
            window=payload.window,
            order=payload.order,
            rapid_increase_threshold=payload.rapid_increase_threshold,
        )
    except HistoryTooLongError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/assess", response_model=Assessment)
async def assess_observation(payload: AssessRequest) -> Assessment:
    try:
        return assessment_service.run(
            payload.observation,
            thresholds=payload.thresholds,
            history=payload.history,
            order=payload.order,
        )
    except HistoryTooLongError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/normalize", response_model=Observation)
async def normalize_observation(payload: Dict[str, Any]) -> Observation:
    try:
        observation = build_observation(payload)
        # range checks live on the HTTP model
        VitalSignsIn.model_validate(observation.model_dump())
    except (VitalsNormalizationError, ValidationError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return observation


@router.post("/overdue", response_model=OverdueResponse)
async def overdue_observation(payload: OverdueRequest) -> OverdueResponse:
    alert = check_overdue(payload.last_recorded_at, payload.tier, payload.now)
    return OverdueResponse(overdue=alert is not None, alert=alert)


@router.get("/thresholds/defaults", response_model=ThresholdDefaults)
async def threshold_defaults() -> ThresholdDefaults:
    return ThresholdDefaults(thresholds=resolve_thresholds(None))
