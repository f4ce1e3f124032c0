"""Score package with registry and the NEWS2 parameter scorers."""

from . import news2  # noqa: F401
from .news2 import score, score_breakdown
from .registry import registered_parameters

__all__ = ["score", "score_breakdown", "registered_parameters"]
