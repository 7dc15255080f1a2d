"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns a 503 problem if the database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status

from user_service.api.problem_details import problem_response
from user_service.core.domain_types import ProblemType
from user_service.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "user-service",
        "version": "0.1.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return problem_response(
            ProblemType.SERVICE_UNAVAILABLE,
            instance=request.url.path,
            detail="database unavailable",
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
