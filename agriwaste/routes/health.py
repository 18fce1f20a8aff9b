"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends, Request, status

from agriwaste.config.store import DocumentStore, get_store
from agriwaste.core import messages
from agriwaste.core.errors import ApiError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(request: Request):
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/db")
def database_health(store: DocumentStore = Depends(get_store)):
    """
    Database connectivity check.
    Pings the configured store.
    """
    try:
        store.ping()
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        raise ApiError(status.HTTP_503_SERVICE_UNAVAILABLE, messages.DATABASE_UNAVAILABLE)

    return {
        "status": "healthy",
        "database": store.name,
        "connected": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
