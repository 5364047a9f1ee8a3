"""
Pydantic schemas for the echo endpoint.

The echo endpoint decodes a message body strictly and returns it unchanged,
which makes it a convenient target for clients integrating with jparser.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from jparser.schemas.base import StrictRequestModel


class EchoSender(StrictRequestModel):
    """Optional sender block nested inside an echo message."""
    name: str = Field(..., description="Display name of the sender")
    email: Optional[str] = Field(None, description="Contact address")


class EchoRequest(StrictRequestModel):
    """
    Request for POST /echo.

    Only `message` is required. Any key not listed here is rejected.
    """
    message: str = Field(..., description="Text to echo back", min_length=1)
    repeat: int = Field(1, description="How many times to repeat the message", ge=1, le=10)
    tags: List[str] = Field(default_factory=list, description="Free-form labels")
    sender: Optional[EchoSender] = Field(None, description="Who sent the message")


class EchoResponse(BaseModel):
    """Response for POST /echo."""
    status: Literal["OK"] = "OK"
    echoed: List[str] = Field(..., description="The message, repeated `repeat` times")
    tags: List[str] = Field(default_factory=list)
    sender: Optional[str] = Field(None, description="Sender name, if one was given")
