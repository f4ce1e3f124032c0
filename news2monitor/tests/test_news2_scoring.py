from __future__ import annotations

import pytest

from news2monitor.core.scores import registered_parameters, score, score_breakdown
from news2monitor.schemas.observation import Consciousness

from .factories import make_observation


def test_normal_vitals_score_zero(baseline):
    assert score(baseline) == 0


def test_critical_vitals_score_nineteen(critical_observation):
    breakdown = score_breakdown(critical_observation)
    assert breakdown.parameter_points() == {
        "respiratory_rate": 3,
        "oxygen_saturation": 3,
        "supplemental_oxygen": 2,
        "systolic_bp": 3,
        "pulse_rate": 3,
        "consciousness": 3,
        "temperature": 2,
    }
    assert breakdown.total == 19


def test_medium_vitals_score_six(medium_observation):
    breakdown = score_breakdown(medium_observation)
    assert [
        breakdown.respiratory_rate,
        breakdown.oxygen_saturation,
        breakdown.supplemental_oxygen,
        breakdown.systolic_bp,
        breakdown.pulse_rate,
        breakdown.consciousness,
        breakdown.temperature,
    ] == [2, 1, 0, 1, 1, 0, 1]
    assert breakdown.total == 6


@pytest.mark.parametrize(
    ("field", "value", "points"),
    [
        ("respiratory_rate", 8, 3),
        ("respiratory_rate", 9, 1),
        ("respiratory_rate", 11, 1),
        ("respiratory_rate", 12, 0),
        ("respiratory_rate", 20, 0),
        ("respiratory_rate", 21, 2),
        ("respiratory_rate", 24, 2),
        ("respiratory_rate", 25, 3),
        ("oxygen_saturation", 91, 3),
        ("oxygen_saturation", 92, 2),
        ("oxygen_saturation", 93, 2),
        ("oxygen_saturation", 94, 1),
        ("oxygen_saturation", 95, 1),
        ("oxygen_saturation", 96, 0),
        ("systolic_bp", 90, 3),
        ("systolic_bp", 91, 2),
        ("systolic_bp", 100, 2),
        ("systolic_bp", 101, 1),
        ("systolic_bp", 110, 1),
        ("systolic_bp", 111, 0),
        ("systolic_bp", 219, 0),
        ("systolic_bp", 220, 3),
        ("pulse_rate", 40, 3),
        ("pulse_rate", 41, 1),
        ("pulse_rate", 50, 1),
        ("pulse_rate", 51, 0),
        ("pulse_rate", 90, 0),
        ("pulse_rate", 91, 1),
        ("pulse_rate", 110, 1),
        ("pulse_rate", 111, 2),
        ("pulse_rate", 130, 2),
        ("pulse_rate", 131, 3),
        ("temperature", 35.0, 3),
        ("temperature", 35.1, 1),
        ("temperature", 36.0, 1),
        ("temperature", 36.1, 0),
        ("temperature", 38.0, 0),
        ("temperature", 38.1, 1),
        ("temperature", 39.0, 1),
        ("temperature", 39.1, 2),
    ],
)
def test_band_edges(field, value, points):
    breakdown = score_breakdown(make_observation(**{field: value}))
    assert getattr(breakdown, field) == points
    assert breakdown.total == points


def test_respiratory_rate_20_to_21_adds_two():
    assert score(make_observation(respiratory_rate=21)) - score(make_observation(respiratory_rate=20)) == 2


def test_supplemental_oxygen_adds_two(medium_observation):
    with_oxygen = medium_observation.model_copy(update={"supplemental_oxygen": True})
    without_oxygen = medium_observation.model_copy(update={"supplemental_oxygen": False})
    assert score(with_oxygen) - score(without_oxygen) == 2


@pytest.mark.parametrize(
    "level",
    [Consciousness.CONFUSED, Consciousness.VOICE, Consciousness.PAIN, Consciousness.UNRESPONSIVE],
)
def test_any_change_in_consciousness_adds_three(level):
    alert = make_observation(consciousness=Consciousness.ALERT)
    altered = make_observation(consciousness=level)
    assert score(altered) - score(alert) == 3


def test_scoring_is_deterministic(critical_observation):
    assert score_breakdown(critical_observation) == score_breakdown(critical_observation)


def test_breakdown_sums_to_total(critical_observation, medium_observation, baseline):
    for observation in (critical_observation, medium_observation, baseline):
        breakdown = score_breakdown(observation)
        assert sum(breakdown.parameter_points().values()) == breakdown.total == score(observation)


def test_out_of_domain_values_still_score():
    observation = make_observation(respiratory_rate=-4, oxygen_saturation=0, systolic_bp=400, temperature=50.0)
    breakdown = score_breakdown(observation)
    assert breakdown.respiratory_rate == 3
    assert breakdown.oxygen_saturation == 3
    assert breakdown.systolic_bp == 3
    assert breakdown.temperature == 2


def test_red_flag_parameters(critical_observation, medium_observation):
    assert score_breakdown(medium_observation).red_flag_parameters == []
    flagged = score_breakdown(critical_observation).red_flag_parameters
    assert flagged == ["respiratory_rate", "oxygen_saturation", "systolic_bp", "pulse_rate", "consciousness"]
    single = score_breakdown(make_observation(pulse_rate=135))
    assert single.has_red_flag
    assert single.total == 3


def test_parameters_registered_in_breakdown_order():
    assert registered_parameters() == (
        "respiratory_rate",
        "oxygen_saturation",
        "supplemental_oxygen",
        "systolic_bp",
        "pulse_rate",
        "consciousness",
        "temperature",
    )


@pytest.mark.parametrize(("value", "points"), [(39.05, 2), (35.05, 1), (36.05, 0), (38.05, 1)])
def test_temperature_between_published_edges_takes_next_band(value, points):
    assert score(make_observation(temperature=value)) == points
