"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - Outside the /api group: probes never pass through authenticate()
"""

import logging
from fastapi import APIRouter, status

from storefront.api.responses import envelope
import storefront.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return envelope(status.HTTP_200_OK, "OK", {"service": "storefront-api"})


@router.get("/ready")
async def readiness_check():
    """Readiness probe, including database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return envelope(
            status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable",
            {"database": "unavailable"},
        )
    return envelope(status.HTTP_200_OK, "OK", {"database": "healthy"})
