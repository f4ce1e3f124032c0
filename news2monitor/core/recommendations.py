"""Rule-based care recommendations for a classified NEWS2 score."""

from __future__ import annotations

from typing import List, Optional

from ..content import load_pack
from ..schemas.alerts import AlertClassification, CareRecommendations, MonitoringPlan, Trend
from ..schemas.observation import ScoreBreakdown

__all__ = ["build_recommendations"]


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(item for item in items if item))


def _scored_parameter_labels(breakdown: ScoreBreakdown) -> List[str]:
    parameters = load_pack().get("parameters", {})
    labels = []
    for name, points in breakdown.parameter_points().items():
        if points > 0:
            labels.append(parameters.get(name, {}).get("label", name))
    return labels


def build_recommendations(
    classification: AlertClassification,
    breakdown: Optional[ScoreBreakdown] = None,
    trend: Trend = Trend.STABLE,
) -> CareRecommendations:
    """Assemble recommendations for the classified tier.

    Parameters that contributed points become monitoring focus areas, a
    single-parameter red score adds an immediate action and a rising trend
    adds an escalation criterion.
    """

    pack = load_pack()
    rules = pack["recommendations"][classification.tier.value]

    immediate = list(rules.get("immediate_actions", []))
    focus = list(rules.get("focus_areas", []))
    escalation = list(rules.get("escalation_criteria", []))

    if breakdown is not None:
        focus = _scored_parameter_labels(breakdown) + focus
        if breakdown.has_red_flag:
            immediate.append(pack["red_flag_action"])
    if trend is Trend.RISING:
        escalation.insert(0, pack["trend_escalation"])

    return CareRecommendations(
        immediate_actions=_dedupe(immediate),
        monitoring_plan=MonitoringPlan(frequency=rules["frequency"], focus_areas=_dedupe(focus)),
        care_suggestions=list(rules.get("care_suggestions", [])),
        escalation_criteria=_dedupe(escalation),
        clinical_reasoning=rules["clinical_reasoning"],
        source=f"rules-{classification.tier.value}",
    )
