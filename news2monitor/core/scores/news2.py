"""NEWS2 parameter scorers.

Each scorer maps one vital sign onto its band points using the tables in the
``news2`` content pack. Registration order is the order used for the
breakdown: respiration, saturation, supplemental oxygen, blood pressure,
pulse, consciousness, temperature.
"""

from __future__ import annotations

from typing import Any, Mapping

from ...schemas.observation import Observation, ScoreBreakdown
from .registry import band_points, register, run_parameters


@register("respiratory_rate")
def respiratory_rate(observation: Observation, table: Mapping[str, Any]) -> int:
    return band_points(observation.respiratory_rate, table["bands"])


@register("oxygen_saturation")
def oxygen_saturation(observation: Observation, table: Mapping[str, Any]) -> int:
    return band_points(observation.oxygen_saturation, table["bands"])


@register("supplemental_oxygen")
def supplemental_oxygen(observation: Observation, table: Mapping[str, Any]) -> int:
    if observation.supplemental_oxygen:
        return int(table.get("points_when_true", 2))
    return int(table.get("points_when_false", 0))


@register("systolic_bp")
def systolic_bp(observation: Observation, table: Mapping[str, Any]) -> int:
    return band_points(observation.systolic_bp, table["bands"])


@register("pulse_rate")
def pulse_rate(observation: Observation, table: Mapping[str, Any]) -> int:
    return band_points(observation.pulse_rate, table["bands"])


@register("consciousness")
def consciousness(observation: Observation, table: Mapping[str, Any]) -> int:
    levels = table.get("levels", {})
    # anything other than Alert is a new change in consciousness
    return int(levels.get(observation.consciousness.value, 3))


@register("temperature")
def temperature(observation: Observation, table: Mapping[str, Any]) -> int:
    return band_points(observation.temperature, table["bands"])


def score_breakdown(observation: Observation) -> ScoreBreakdown:
    """Return the per-parameter points and total for *observation*."""

    return run_parameters(observation)


def score(observation: Observation) -> int:
    """Return the aggregate NEWS2 score (0-20) for *observation*."""

    return score_breakdown(observation).total
