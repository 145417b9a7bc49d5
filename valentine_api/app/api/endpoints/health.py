"""Liveness endpoint."""

from fastapi import APIRouter

from valentine_api.app.schemas.health import HealthStatus
from valentine_api.app.services.response_service import ResponseService

router = APIRouter()


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthStatus)
async def get_health() -> HealthStatus:
    """Report that the service is up.  Always ``{"status": "ok", ...}``."""
    return ResponseService.build_health()
