"""FastAPI application factory.

Exposes the pipeline steps over HTTP for hosts that do not embed the
library directly.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from customer_match.api.routes.health import router as health_router
from customer_match.api.routes.pipeline import router as pipeline_router
from customer_match.core.logging import setup_logging
from customer_match.core.settings import get_settings


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(pipeline_router)
