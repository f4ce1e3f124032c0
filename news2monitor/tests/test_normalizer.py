from __future__ import annotations

import pytest

from news2monitor.core.normalizer import VitalsNormalizationError, build_observation, normalize_vitals
from news2monitor.core.normalizer.text import normalize_key, normalize_text
from news2monitor.core.scores import score
from news2monitor.schemas.observation import Consciousness


def test_normalize_text_strips_accents_and_spacing():
    assert normalize_text("  Confusão   Nova ") == "confusao nova"
    assert normalize_text(None) == ""  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("systolicBP", "systolic_bp"),
        ("Resp Rate", "resp_rate"),
        ("pulse-rate", "pulse_rate"),
        ("SpO2", "sp_o2"),
        ("spo2", "spo2"),
    ],
)
def test_normalize_key(key, expected):
    assert normalize_key(key) == expected


def test_aliases_map_to_observation_fields():
    data = normalize_vitals(
        {"RR": "18", "SpO2": "97%", "o2": "room air", "sbp": 128.4, "HR": 72, "AVPU": "alert", "temp": "36,8"}
    )
    assert data == {
        "respiratory_rate": 18,
        "oxygen_saturation": 97,
        "supplemental_oxygen": False,
        "systolic_bp": 128,
        "pulse_rate": 72,
        "consciousness": Consciousness.ALERT,
        "temperature": 36.8,
    }


def test_fahrenheit_temperature_is_converted():
    assert normalize_vitals({"temperature": 98.6})["temperature"] == 37.0
    assert normalize_vitals({"temperature": "102.2"})["temperature"] == 39.0
    assert normalize_vitals({"temperature": 38.2})["temperature"] == 38.2


@pytest.mark.parametrize(
    ("word", "level"),
    [
        ("A", Consciousness.ALERT),
        ("New confusion", Consciousness.CONFUSED),
        ("voice", Consciousness.VOICE),
        ("P", Consciousness.PAIN),
        ("Unresponsive", Consciousness.UNRESPONSIVE),
    ],
)
def test_consciousness_words(word, level):
    assert normalize_vitals({"consciousness": word})["consciousness"] is level


@pytest.mark.parametrize("flag", ["yes", "TRUE", 1, True, "on"])
def test_oxygen_flag_truthy_values(flag):
    assert normalize_vitals({"o2": flag})["supplemental_oxygen"] is True


def test_none_values_are_dropped():
    assert normalize_vitals({"notes": None, "pulse": 80}) == {"pulse_rate": 80}


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"blood_sugar": 5}, "Unknown vital sign field"),
        ({"pulse": "fast"}, "not numeric"),
        ({"temp": "warm"}, "not numeric"),
        ({"avpu": "drowsy"}, "Unknown consciousness level"),
        ({"o2": "maybe"}, "supplemental oxygen"),
        ({"rr": "nan"}, "not numeric"),
        ({"spo2": "inf"}, "not numeric"),
        ({"temp": "-inf"}, "not numeric"),
        ({"sbp": "1e400"}, "not numeric"),
    ],
)
def test_invalid_payloads_raise(payload, message):
    with pytest.raises(VitalsNormalizationError, match=message):
        normalize_vitals(payload)


def test_build_observation_scores_like_direct_construction():
    observation = build_observation(
        {
            "respRate": 22,
            "spo2": 94,
            "systolicBP": 105,
            "heartRate": 95,
            "temperature": 100.9,
            "notes": "Resident reports feeling hot",
        }
    )
    assert observation.temperature == 38.3
    assert observation.consciousness is Consciousness.ALERT
    assert observation.notes == "Resident reports feeling hot"
    assert score(observation) == 6


def test_build_observation_reports_missing_fields():
    with pytest.raises(VitalsNormalizationError, match="systolic_bp, pulse_rate, temperature"):
        build_observation({"rr": 16, "spo2": 98})


def test_normalization_error_is_a_value_error():
    with pytest.raises(ValueError):
        build_observation({})
