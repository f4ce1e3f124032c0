from .units import VitalsNormalizationError, build_observation, normalize_vitals

__all__ = ["VitalsNormalizationError", "build_observation", "normalize_vitals"]
