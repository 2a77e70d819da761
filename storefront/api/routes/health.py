"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready reports the live record count of every collection
"""

from fastapi import APIRouter, Depends, Request, status

from storefront.api.dependencies import get_store
from storefront.core.store import CommerceStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.version,
    }


@router.get("/ready")
async def readiness_check(store: CommerceStore = Depends(get_store)):
    """Readiness probe with record counts per collection."""
    return {"status": "ready", "records": store.counts()}
