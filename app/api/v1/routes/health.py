"""Health check endpoints."""
from fastapi import APIRouter, Response, status
from typing import Dict, Any

from app.services import health_service as health_module
from app.services.health_service import HealthStatus

router = APIRouter()


@router.get("/health", tags=["health"])
async def simple_health_check() -> Dict[str, str]:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return {"status": "ok"}


@router.get("/health/detailed", tags=["health"])
def detailed_health_check(response: Response) -> Dict[str, Any]:
    """
    Detailed health check with dependency checks.

    Returns HTTP 200 if all components are healthy.
    Returns HTTP 503 if any component is unhealthy.
    """
    health_data = health_module.health_service.get_overall_health()

    if health_data["status"] == HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        response.status_code = status.HTTP_200_OK

    return health_data
