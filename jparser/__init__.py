"""
jparser: strict JSON request body decoding for FastAPI.
"""

from jparser.decoder import (
    Accepted,
    DecodeOutcome,
    Rejected,
    decode_json_body,
    decode_request_body,
    parse_json_request,
)
from jparser.dependencies import json_body
from jparser.error_handlers import register_error_handlers
from jparser.errors import RequestBodyError
from jparser.schemas.base import StrictRequestModel

__all__ = [
    "Accepted",
    "DecodeOutcome",
    "Rejected",
    "RequestBodyError",
    "StrictRequestModel",
    "decode_json_body",
    "decode_request_body",
    "json_body",
    "parse_json_request",
    "register_error_handlers",
]
