"""Helpers to load NEWS2 content packs."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import yaml

__all__ = ["load_pack", "DEFAULT_PACK"]

DEFAULT_PACK = "news2"


@lru_cache(maxsize=8)
def load_pack(pack_id: str = DEFAULT_PACK) -> Dict[str, Any]:
    """Load the YAML pack identified by *pack_id*."""

    path = resources.files(__name__).joinpath("packs").joinpath(f"{pack_id}.yml")
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)
