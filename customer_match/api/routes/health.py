"""GET /health — liveness and pipeline readiness.

The pipeline is ready when the digest primitive used for identifier
hashing is available.  Without it every normalize call would fail with
``HASHING_ERROR``, so the service reports itself degraded (HTTP 503).
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from customer_match.core.settings import get_settings
from customer_match.normalization import hasher

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness and hashing readiness check")
def health_check():
    settings = get_settings()
    ready = hasher.hashing_available()
    body = {
        "status": "ok" if ready else "degraded",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "hashAlgorithm": hasher.HASH_ALGORITHM,
        "hashing": "available" if ready else "unavailable",
        "operationType": settings.operation_type,
        "userIdentifierSource": settings.user_identifier_source,
    }
    if not ready:
        logger.error("health_check: hash algorithm %s unavailable", hasher.HASH_ALGORITHM)
        return JSONResponse(status_code=503, content=body)
    return body
