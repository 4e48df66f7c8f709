"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 {"status": "OK", "uptime": <seconds>} if the process is up
    - GET /health/ready returns 503 if the user directory has nothing to serve
    - uptime is read from the process clock, never reset by a request

Design Decisions:
    - Liveness and readiness are separate probes
    - Clock injected via Depends: tests override it instead of sleeping
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core.uptime import UptimeClock, get_process_clock
from app.core.user_directory import UserDirectory, get_user_directory
from app.schemas.system import HealthStatus, ReadinessStatus

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus, status_code=status.HTTP_200_OK)
async def health_check(clock: UptimeClock = Depends(get_process_clock)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthStatus(status="OK", uptime=clock.uptime())


@router.get(
    "/ready", response_model=ReadinessStatus,
    responses={503: {"description": "User directory unavailable"}},
)
async def readiness_check(
    directory: UserDirectory = Depends(get_user_directory),
):
    """Readiness probe — the user directory must have data to serve."""
    if len(directory) == 0:
        logger.warning("Readiness check failed: user directory is empty")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "user_directory_empty",
            },
        )
    return ReadinessStatus(checks={"user_directory": "healthy"})
