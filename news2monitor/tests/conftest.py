from __future__ import annotations

import pytest

from news2monitor.schemas.observation import Consciousness, Observation

from .factories import make_observation


@pytest.fixture
def baseline() -> Observation:
    return make_observation()


@pytest.fixture
def critical_observation() -> Observation:
    return make_observation(
        respiratory_rate=25,
        oxygen_saturation=90,
        supplemental_oxygen=True,
        systolic_bp=85,
        pulse_rate=135,
        consciousness=Consciousness.PAIN,
        temperature=39.5,
    )


@pytest.fixture
def medium_observation() -> Observation:
    return make_observation(
        respiratory_rate=22,
        oxygen_saturation=94,
        systolic_bp=105,
        pulse_rate=95,
        temperature=38.3,
    )
