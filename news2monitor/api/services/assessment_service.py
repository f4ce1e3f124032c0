"""Glue between the HTTP layer and the NEWS2 core."""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Sequence

from ...core.alerts import classify
from ...core.orchestrator import assess
from ...core.trend import classify_trend, detect_rapid_increase, score_delta
from ...schemas.alerts import AlertClassification, Assessment, TrendOrder
from ..core.config import settings
from ..core.feature_flags import flag_enabled
from ..core.metrics import MetricEvent, record_event
from ..schemas.news2 import TrendResponse, VitalSignsIn

logger = logging.getLogger("news2monitor.service")


class HistoryTooLongError(ValueError):
    """Raised when a caller supplies more history than the service accepts."""


class AssessmentService:
    """Run assessments and record metrics."""

    def __init__(self, *, window: Optional[int] = None, max_history: Optional[int] = None) -> None:
        self.window = window or settings.trend_window
        self.max_history = max_history or settings.max_history

    def _check_history(self, scores: Sequence[int]) -> None:
        if len(scores) > self.max_history:
            raise HistoryTooLongError(
                f"History holds {len(scores)} scores; at most {self.max_history} are accepted"
            )

    def run(
        self,
        vitals: VitalSignsIn,
        thresholds: Optional[Dict[str, Any]] = None,
        history: Sequence[int] = (),
        order: TrendOrder = TrendOrder.OLDEST_FIRST,
    ) -> Assessment:
        self._check_history(history)
        start = time.perf_counter()
        result = assess(
            vitals.to_observation(),
            thresholds=thresholds,
            history=history,
            order=order,
            window=self.window,
        )
        latency_ms = (time.perf_counter() - start) * 1000
        record_event(
            MetricEvent(
                timestamp=time.time(),
                score=result.breakdown.total,
                tier=result.classification.tier.value,
                trend=result.trend.value,
                latency_ms=latency_ms,
                alert_types=[alert.alert_type for alert in result.alerts],
                red_flag_parameters=list(result.breakdown.red_flag_parameters),
                notified=bool(result.notify_channels),
            )
        )
        if flag_enabled("NEWS2_LOG_ASSESSMENTS"):
            logger.info(result.model_dump_json(exclude={"observation": {"notes"}}))
        return result

    def classify(self, score: int, thresholds: Optional[Dict[str, Any]] = None) -> AlertClassification:
        return classify(score, thresholds)

    def trend(
        self,
        scores: Sequence[int],
        window: Optional[int] = None,
        order: TrendOrder = TrendOrder.OLDEST_FIRST,
        rapid_increase_threshold: Optional[int] = None,
    ) -> TrendResponse:
        self._check_history(scores)
        threshold_args = {} if rapid_increase_threshold is None else {"threshold": rapid_increase_threshold}
        return TrendResponse(
            trend=classify_trend(scores, window=window or self.window, order=order),
            score_delta=score_delta(scores, order=order),
            rapid_increase=detect_rapid_increase(scores, order=order, **threshold_args),
            observations=len(scores),
        )


assessment_service = AssessmentService()
