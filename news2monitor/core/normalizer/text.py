"""Utilities for normalising free-text clinical inputs."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["normalize_text", "normalize_key"]


_WHITESPACE_RE = re.compile(r"\s+")
_KEY_SPLIT_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[\s\-]+")


def normalize_text(value: str) -> str:
    """Return a lower-cased, accentless version of *value* suitable for matching."""

    if not isinstance(value, str):
        return ""
    normalized = unicodedata.normalize("NFKD", value)
    normalized = normalized.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower().strip()
    normalized = _WHITESPACE_RE.sub(" ", normalized)
    return normalized


def normalize_key(value: str) -> str:
    """Turn ``systolicBP``, ``Resp Rate`` or ``pulse-rate`` into snake case."""

    parts = _KEY_SPLIT_RE.split(str(value).strip())
    return "_".join(part.lower() for part in parts if part)
