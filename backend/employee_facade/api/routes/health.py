"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 until the upstream client is initialized

Design Decisions:
    - Readiness does not call upstream: a probe must not spend the upstream rate limit
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import employee_facade.infrastructure.employee_api_client as employee_api

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "employee-facade",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — upstream client configured."""
    client = employee_api.employee_api_client
    if client is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "employee_api_client_uninitialized",
            },
        )
    return {"status": "ready", "checks": {"employee_api": client.base_url}}
