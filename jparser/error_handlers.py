"""
Global exception handlers for request body rejections.

RequestBodyError -> {"error": "<message>"} with the error's status code.
Internal failures were already logged with full detail by the decoder; the
client only ever sees the generic reason phrase.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jparser.errors import RequestBodyError
from jparser.utils.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register request body error handlers on the FastAPI app."""

    @app.exception_handler(RequestBodyError)
    async def request_body_error_handler(request: Request, exc: RequestBodyError) -> JSONResponse:
        """Write the rejection as a single-key JSON error payload."""
        logger.info(
            f"{request.method} {request.url.path} rejected with {exc.status_code}: {type(exc).__name__}"
        )
        return exc.to_response()
