# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides a health check endpoint for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from app.config import settings
from app.dependencies import AlbumStoreDep

API_VERSION = "1.0.0"

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    model_config = ConfigDict(populate_by_name=True)

    status: str
    timestamp: str
    environment: str
    version: str
    album_count: int = Field(..., alias="albumCount")


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(store: AlbumStoreDep):
    """
    Health check endpoint.

    Returns basic health status and how many albums are currently stored.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
        album_count=len(store),
    )
