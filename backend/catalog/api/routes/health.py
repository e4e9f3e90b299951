"""Health Probes: liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - GET /api/v1/health/ready returns 503 until the catalog has loaded
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from catalog.api.dependencies import get_controller
from catalog.services.interaction_controller import InteractionController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": "catalog-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    controller: InteractionController = Depends(get_controller),
):
    """Readiness probe: the product payload has been loaded."""
    if not controller.loaded:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "catalog_not_loaded",
                "phase": controller.phase.value,
            },
        )
    return {"status": "ready", "checks": {"catalog": "loaded"}}
