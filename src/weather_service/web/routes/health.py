# ABOUTME: Health check route for load balancers and orchestration probes.

from fastapi import APIRouter
from pydantic import BaseModel

from weather_service import __version__

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str = __version__


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for load balancer."""
    return HealthResponse(status="healthy")
