"""Normalisation of loosely-typed vital-sign payloads into observations."""

from __future__ import annotations

import math

from typing import Any, Dict, Mapping

from pydantic import ValidationError

from ...schemas.observation import Consciousness, Observation
from .text import normalize_key, normalize_text

__all__ = ["VitalsNormalizationError", "build_observation", "normalize_vitals"]


class VitalsNormalizationError(ValueError):
    """Raised when a vital-sign payload cannot be turned into an observation."""


_ALIASES: Dict[str, str] = {
    "respiratory_rate": "respiratory_rate",
    "resp_rate": "respiratory_rate",
    "rr": "respiratory_rate",
    "oxygen_saturation": "oxygen_saturation",
    "spo2": "oxygen_saturation",
    "sp_o2": "oxygen_saturation",
    "o2_sat": "oxygen_saturation",
    "supplemental_oxygen": "supplemental_oxygen",
    "o2": "supplemental_oxygen",
    "o2_therapy": "supplemental_oxygen",
    "on_oxygen": "supplemental_oxygen",
    "systolic_bp": "systolic_bp",
    "sbp": "systolic_bp",
    "bp_sys": "systolic_bp",
    "pulse_rate": "pulse_rate",
    "pulse": "pulse_rate",
    "heart_rate": "pulse_rate",
    "hr": "pulse_rate",
    "consciousness": "consciousness",
    "consciousness_level": "consciousness",
    "avpu": "consciousness",
    "acvpu": "consciousness",
    "temperature": "temperature",
    "temp": "temperature",
    "temperature_c": "temperature",
    "recorded_at": "recorded_at",
    "timestamp": "recorded_at",
    "notes": "notes",
    "clinical_notes": "notes",
}

_CONSCIOUSNESS_WORDS: Dict[str, Consciousness] = {
    "a": Consciousness.ALERT,
    "alert": Consciousness.ALERT,
    "c": Consciousness.CONFUSED,
    "confused": Consciousness.CONFUSED,
    "confusion": Consciousness.CONFUSED,
    "new confusion": Consciousness.CONFUSED,
    "v": Consciousness.VOICE,
    "voice": Consciousness.VOICE,
    "p": Consciousness.PAIN,
    "pain": Consciousness.PAIN,
    "u": Consciousness.UNRESPONSIVE,
    "unresponsive": Consciousness.UNRESPONSIVE,
}

_TRUE_WORDS = {"1", "true", "yes", "y", "on"}
_FALSE_WORDS = {"0", "false", "no", "n", "off", "", "room air", "air"}

_INTEGER_FIELDS = ("respiratory_rate", "oxygen_saturation", "systolic_bp", "pulse_rate")
_REQUIRED_FIELDS = _INTEGER_FIELDS + ("temperature",)


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().rstrip("%").replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # nan and inf are not readings
    return number if math.isfinite(number) else None


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    word = normalize_text(str(value))
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise VitalsNormalizationError(f"Cannot read supplemental oxygen flag from {value!r}")


def _to_consciousness(value: Any) -> Consciousness:
    if isinstance(value, Consciousness):
        return value
    level = _CONSCIOUSNESS_WORDS.get(normalize_text(str(value)))
    if level is None:
        raise VitalsNormalizationError(f"Unknown consciousness level {value!r}")
    return level


def normalize_vitals(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Standardise field names and value types of a vital-sign payload.

    Temperatures above 50 are taken as Fahrenheit and converted to Celsius.
    Unknown keys raise :class:`VitalsNormalizationError`.
    """

    normalized: Dict[str, Any] = {}
    for key, value in raw.items():
        canonical = _ALIASES.get(normalize_key(key))
        if canonical is None:
            raise VitalsNormalizationError(f"Unknown vital sign field '{key}'")
        if value is None:
            continue
        normalized[canonical] = value

    for field in _INTEGER_FIELDS:
        if field in normalized:
            number = _to_float(normalized[field])
            if number is None:
                raise VitalsNormalizationError(f"Field '{field}' is not numeric: {normalized[field]!r}")
            normalized[field] = int(round(number))

    if "temperature" in normalized:
        temp = _to_float(normalized["temperature"])
        if temp is None:
            raise VitalsNormalizationError(f"Field 'temperature' is not numeric: {normalized['temperature']!r}")
        if temp > 50:
            temp = (temp - 32) * 5 / 9
        normalized["temperature"] = round(temp, 1)

    if "supplemental_oxygen" in normalized:
        normalized["supplemental_oxygen"] = _to_bool(normalized["supplemental_oxygen"])
    if "consciousness" in normalized:
        normalized["consciousness"] = _to_consciousness(normalized["consciousness"])
    return normalized


def build_observation(raw: Mapping[str, Any]) -> Observation:
    """Normalise *raw* and validate it into an :class:`Observation`."""

    data = normalize_vitals(raw)
    missing = [field for field in _REQUIRED_FIELDS if field not in data]
    if missing:
        raise VitalsNormalizationError(f"Missing vital signs: {', '.join(missing)}")
    try:
        return Observation(**data)
    except ValidationError as exc:
        raise VitalsNormalizationError(str(exc)) from exc
