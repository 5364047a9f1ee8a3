"""
Rejection taxonomy for JSON request bodies.

Every way a request body can fail to decode maps to exactly one
RequestBodyError subclass. Client faults carry status 400 and a message
that is safe to show verbatim; InternalDecodeError carries 500 and the
generic reason phrase only.
"""

import json
from http import HTTPStatus
from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse


def _quote(name: str) -> str:
    """Double-quote a name the way it appears in error messages."""
    return json.dumps(name, ensure_ascii=False)


class RequestBodyError(Exception):
    """Base class for every request body rejection."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        """Error payload written to the client: exactly one "error" key."""
        return {"error": self.message}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_payload())


class EmptyBodyError(RequestBodyError):
    def __init__(self):
        super().__init__("Request body must not be empty")


class MalformedJSONError(RequestBodyError):
    """
    Syntax error in the body.

    offset is None when the input ended before the value was complete;
    otherwise it is the 1-based byte offset where the parser gave up.
    """

    def __init__(self, offset: Optional[int] = None):
        if offset is None:
            message = "Request body contains badly-formed JSON"
        else:
            message = f"Request body contains badly-formed JSON (at position {offset})"
        super().__init__(message)
        self.offset = offset

    @property
    def truncated(self) -> bool:
        return self.offset is None


class InvalidFieldValueError(RequestBodyError):
    """A value does not fit the declared type of its field."""

    def __init__(self, field: str, offset: int):
        if field:
            message = (
                f"Request body contains an invalid value for the {_quote(field)} field "
                f"(at position {offset})"
            )
        else:
            message = f"Request body contains an invalid value (at position {offset})"
        super().__init__(message)
        self.field = field
        self.offset = offset


class UnknownFieldError(RequestBodyError):
    """The body carries a key the target model does not declare."""

    def __init__(self, name: str):
        super().__init__(f"Request body contains unknown field {_quote(name)}")
        self.name = name


class MissingFieldError(RequestBodyError):
    def __init__(self, field: str):
        super().__init__(f"Request body is missing the {_quote(field)} field")
        self.field = field


class NotAnObjectError(RequestBodyError):
    def __init__(self, offset: int):
        super().__init__(f"Request body must contain a JSON object (at position {offset})")
        self.offset = offset


class TrailingContentError(RequestBodyError):
    def __init__(self):
        super().__init__("Request body must only contain a single JSON object")


class InternalDecodeError(RequestBodyError):
    """Unclassified failure. Details are logged, never sent to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self):
        super().__init__(HTTPStatus.INTERNAL_SERVER_ERROR.phrase)
