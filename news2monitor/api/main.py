"""FastAPI application bootstrap."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .core.config import settings
from .core.feature_flags import feature_flags_snapshot
from .core.logging import register_middleware, setup_logging
from .core.security import enable_cors
from .routers import health, metrics, news2

setup_logging(settings.log_level)
logging.getLogger("news2monitor").info("NEWS2 Monitor starting with flags %s", feature_flags_snapshot())

app = FastAPI(title="NEWS2 Monitor API", version=settings.api_version)

register_middleware(app)
enable_cors(app)

app.include_router(health.router)
app.include_router(news2.router)
app.include_router(metrics.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "NEWS2 Monitor API", "health": "/health"}


def run() -> None:
    import uvicorn

    uvicorn.run("news2monitor.api.main:app", host=settings.api_host, port=settings.api_port)
