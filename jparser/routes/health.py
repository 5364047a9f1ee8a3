"""
Health check route for jparser.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification. It takes no request
body.
"""

from fastapi import APIRouter

from jparser.config import settings
from jparser.schemas.health import HealthResponse
from jparser.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "jparser"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", service=settings.APP_NAME)
