"""
FastAPI application entry point for jparser.

This module creates the FastAPI app instance, registers the request body
error handlers and all routers.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jparser.config import settings
from jparser.error_handlers import register_error_handlers
from jparser.routes.echo import router as echo_router
from jparser.routes.health import router as health_router

# Configure logging
logging.basicConfig(
    level=settings.log_level_value,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ORIGINS as configured
    - anything else: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = [origin.strip() for origin in settings.CORS_ORIGINS if origin.strip()]
        logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="jparser API",
    description="Strict JSON request body decoding with precise error messages",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(echo_router)

logger.info("FastAPI app initialized successfully")
