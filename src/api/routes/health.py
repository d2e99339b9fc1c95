"""
Health check endpoints.

Provides endpoints for monitoring application health and status.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from config.settings import get_settings
from styling.service import StyleRecommendationService, get_style_service


router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "style-assistant",
    }


@router.get("/health/detailed")
async def detailed_health_check(
    service: StyleRecommendationService = Depends(get_style_service),
) -> Dict[str, Any]:
    """
    Detailed health check with dependency status.

    Checks:
    - Catalog reachable
    - AI client reachable ("stub" when no API key is configured,
      which is a supported degraded mode)
    """
    settings = get_settings()

    catalog_status = "connected" if await service.catalog.ping() else "error"

    if settings.is_ai_configured:
        ai_status = "connected" if await service.check_ai_connection() else "error"
    else:
        ai_status = "stub"

    healthy = catalog_status == "connected" and ai_status == "connected"
    return {
        "status": "healthy" if healthy else "degraded",
        "service": "style-assistant",
        "environment": settings.environment,
        "checks": {
            "catalog": {"backend": settings.catalog_backend, "status": catalog_status},
            "ai": {"model": settings.openai_model, "status": ai_status},
        },
    }


@router.get("/live")
async def liveness_check() -> Dict[str, str]:
    """Returns 200 if the service is alive."""
    return {"status": "alive"}
