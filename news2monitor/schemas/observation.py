"""Schemas describing a single NEWS2 observation and its score."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import StrictModel


class Consciousness(str, Enum):
    """ACVPU consciousness scale."""

    ALERT = "A"
    CONFUSED = "C"
    VOICE = "V"
    PAIN = "P"
    UNRESPONSIVE = "U"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Observation(StrictModel):
    """One set of vital signs as recorded by a carer.

    No range checks are applied here: the scorer accepts any value and range
    validation belongs to whoever accepts the reading from the outside world.
    """

    respiratory_rate: int
    oxygen_saturation: int
    supplemental_oxygen: bool = False
    systolic_bp: int
    pulse_rate: int
    consciousness: Consciousness = Consciousness.ALERT
    temperature: float
    recorded_at: datetime = Field(default_factory=_utcnow)
    notes: Optional[str] = None


class ScoreBreakdown(StrictModel):
    respiratory_rate: int
    oxygen_saturation: int
    supplemental_oxygen: int
    systolic_bp: int
    pulse_rate: int
    consciousness: int
    temperature: int
    total: int = Field(ge=0)
    red_flag_parameters: List[str] = Field(default_factory=list)

    @property
    def has_red_flag(self) -> bool:
        return bool(self.red_flag_parameters)

    def parameter_points(self) -> dict[str, int]:
        return self.model_dump(exclude={"total", "red_flag_parameters"})
