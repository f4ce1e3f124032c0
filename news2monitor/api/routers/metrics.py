"""Assessment metrics endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Query

from ..core.metrics import metrics_summary

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def metrics(days: int = Query(default=7, ge=1, le=90)) -> dict[str, object]:
    return metrics_summary(days)
