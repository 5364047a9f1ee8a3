"""
Echo endpoint: decodes a strict JSON body and returns it.

Endpoint flow:
- Step 1: Parse/Validate -> json_body(EchoRequest); rejections are written by
  the RequestBodyError handler as {"error": "..."}
- Step 2: Map to ResponseModel -> EchoResponse
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from jparser.dependencies import json_body
from jparser.schemas.echo import EchoRequest, EchoResponse
from jparser.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/echo", tags=["echo"])


@router.post(
    "",
    response_model=EchoResponse,
    status_code=200,
    summary="Echo a strictly validated message",
)
async def echo(
    payload: Annotated[EchoRequest, Depends(json_body(EchoRequest))],
) -> EchoResponse:
    """
    Echo the decoded message back `repeat` times.

    **Returns:**
    - 200 OK: Body decoded successfully
    - 400 BAD REQUEST: Empty, malformed, mistyped, unknown-field or multi-value body
    - 500 INTERNAL SERVER ERROR: Body could not be read
    """
    logger.info(f"POST /echo: repeat={payload.repeat}, tags={len(payload.tags)}")

    return EchoResponse(
        echoed=[payload.message] * payload.repeat,
        tags=payload.tags,
        sender=payload.sender.name if payload.sender else None,
    )
