"""
FastAPI dependency functions for strict JSON request bodies.

Usage:
    @router.post("/echo")
    async def echo(payload: Annotated[EchoRequest, Depends(json_body(EchoRequest))]):
        ...

The dependency raises RequestBodyError on rejection; register_error_handlers
turns that into the {"error": "..."} response.
"""

import logging
from typing import Awaitable, Callable, Optional, Type

from fastapi import Request

from jparser.decoder import ModelT, ensure_closed_shape, parse_json_request


def json_body(
    shape: Type[ModelT],
    log: Optional[logging.Logger] = None,
) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that decodes the request body into `shape`.

    The shape is checked once, here, so a model that allows unknown keys
    fails at import time rather than on the first request.

    Args:
        shape: Closed pydantic model (see StrictRequestModel)
        log: Optional logger injected into the decoder

    Returns:
        An async dependency resolving to the populated model.
    """
    ensure_closed_shape(shape)

    async def dependency(request: Request) -> ModelT:
        return await parse_json_request(request, shape, log=log)

    dependency.__name__ = f"json_body_{shape.__name__}"
    return dependency
