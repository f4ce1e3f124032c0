"""Parameter registry composing the NEWS2 aggregate score."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Sequence, Tuple

from ...content import load_pack
from ...schemas.observation import Observation, ScoreBreakdown

ParameterFunc = Callable[[Observation, Mapping[str, Any]], int]

_REGISTRY: Dict[str, ParameterFunc] = {}


def register(name: str) -> Callable[[ParameterFunc], ParameterFunc]:
    def decorator(func: ParameterFunc) -> ParameterFunc:
        _REGISTRY[name] = func
        return func

    return decorator


def registered_parameters() -> Tuple[str, ...]:
    return tuple(_REGISTRY)


def band_points(value: float, bands: Sequence[Mapping[str, Any]]) -> int:
    """Return the points of the first band whose inclusive ``max`` holds *value*.

    A band without ``max`` is open-ended and always matches.
    """

    for band in bands:
        upper = band.get("max")
        if upper is None or value <= upper:
            return int(band["points"])
    return 0


def run_parameters(observation: Observation, pack_id: str = "news2") -> ScoreBreakdown:
    pack = load_pack(pack_id)
    parameters = pack.get("parameters", {})
    red_points = int(pack.get("red_flag_points", 3))
    points: Dict[str, int] = {}
    for name, func in _REGISTRY.items():
        points[name] = func(observation, parameters.get(name, {}))
    red_flags = [name for name, value in points.items() if value >= red_points]
    return ScoreBreakdown(
        **points,
        total=sum(points.values()),
        red_flag_parameters=red_flags,
    )
