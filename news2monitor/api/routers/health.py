"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from ...content import load_pack
from ..core.config import settings
from ..core.feature_flags import feature_flags_snapshot

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck() -> dict[str, object]:
    return {
        "status": "ok",
        "version": settings.api_version,
        "scoring": load_pack()["meta"]["version"],
        "flags": feature_flags_snapshot(),
    }
