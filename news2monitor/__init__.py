"""NEWS2 early-warning scoring, alert classification and trend tracking."""

__version__ = "0.1.0"
