"""
Health Check Endpoints

Provides system health and readiness endpoints for:
- Load balancer health checks
- Container liveness checks
- Monitoring systems
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from haven import __version__
from haven.api.dependencies import get_remote_classifier
from haven.config import Settings, get_settings
from haven.infrastructure.database import get_db_manager
from haven.infrastructure.remote import RemoteClassifier

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    """
    Readiness check response with component health.

    The classifier is reported but never gates readiness: triage
    works offline through the fallback.
    """

    ready: bool
    components: dict


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Returns 200 if the application is running."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.env,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
)
async def readiness_check(
    classifier: Optional[RemoteClassifier] = Depends(get_remote_classifier),
) -> ReadinessResponse:
    """
    Detailed readiness check.

    Checks the episode store and the remote classifier.
    """
    components = {"database": await get_db_manager().health_check()}

    if classifier is None:
        components["classifier"] = False
    else:
        components["classifier"] = await classifier.health_check()

    return ReadinessResponse(
        ready=components["database"],
        components=components,
    )


@router.get(
    "/live",
    response_model=HealthResponse,
    summary="Liveness check",
)
async def liveness_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="alive",
        version=__version__,
        environment=settings.env,
    )
