"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up
    - Never touches the relation service (it is best-effort by contract)
"""

import logging
from fastapi import APIRouter, status

from leximap.config import API_VERSION

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "leximap-api",
        "version": API_VERSION,
    }
