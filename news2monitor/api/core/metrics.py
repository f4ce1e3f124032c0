"""Lightweight in-memory metrics store for assessment insights."""
from __future__ import annotations

import time
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from .feature_flags import flag_enabled, metrics_capacity


@dataclass
class MetricEvent:
    timestamp: float
    score: int
    tier: str
    trend: Optional[str] = None
    latency_ms: Optional[float] = None
    alert_types: List[str] = field(default_factory=list)
    red_flag_parameters: List[str] = field(default_factory=list)
    notified: bool = False


_EVENTS: Deque[MetricEvent] = deque(maxlen=metrics_capacity())


def record_event(event: MetricEvent) -> None:
    if not flag_enabled("NEWS2_METRICS"):
        return
    _EVENTS.append(event)


def reset_metrics() -> None:
    _EVENTS.clear()


def _filter_events(days: int) -> List[MetricEvent]:
    if not _EVENTS:
        return []
    cutoff = time.time() - days * 86400
    return [e for e in _EVENTS if e.timestamp >= cutoff]


def _percentile(values: List[float], percentile: float) -> Optional[float]:
    if not values:
        return None
    if len(values) == 1:
        return float(values[0])
    values_sorted = sorted(values)
    k = (len(values_sorted) - 1) * percentile
    f = int(k)
    c = min(f + 1, len(values_sorted) - 1)
    if f == c:
        return float(values_sorted[int(k)])
    d0 = values_sorted[f] * (c - k)
    d1 = values_sorted[c] * (k - f)
    return float(d0 + d1)


def metrics_summary(days: int = 7) -> Dict[str, object]:
    events = _filter_events(days)
    if not events:
        return {
            "count": 0,
            "tier_distribution": {},
            "trend_distribution": {},
            "mean_score": None,
            "latency_ms": {},
            "alerts": {},
            "notification_rate": 0.0,
            "top_red_flags": [],
        }

    tiers = Counter(e.tier for e in events)
    trends = Counter(e.trend for e in events if e.trend)
    latencies = [e.latency_ms for e in events if e.latency_ms is not None]
    alert_counts = Counter(alert for e in events for alert in e.alert_types)
    red_flag_counts = Counter(name for e in events for name in e.red_flag_parameters)

    return {
        "count": len(events),
        "tier_distribution": dict(tiers),
        "trend_distribution": dict(trends),
        "mean_score": round(sum(e.score for e in events) / len(events), 2),
        "latency_ms": {
            "p50": _percentile(latencies, 0.5),
            "p95": _percentile(latencies, 0.95),
        },
        "alerts": dict(alert_counts),
        "notification_rate": sum(1 for e in events if e.notified) / len(events),
        "top_red_flags": red_flag_counts.most_common(5),
    }


__all__ = ["MetricEvent", "record_event", "reset_metrics", "metrics_summary"]
