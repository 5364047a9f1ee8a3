"""
Pytest configuration for jparser tests.

Sets up the test environment and a minimal app that decodes one
single-field shape, mirroring how a real handler uses json_body().
"""
import os
from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient
from pydantic import Field

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"
os.environ.setdefault("ENVIRONMENT", "testing")

from jparser.dependencies import json_body  # noqa: E402
from jparser.error_handlers import register_error_handlers  # noqa: E402
from jparser.schemas.base import StrictRequestModel  # noqa: E402


class SampleBody(StrictRequestModel):
    """Declared as `Str`, sent on the wire as "str"."""
    Str: str = Field(alias="str")


def build_sample_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/fake")
    async def fake(payload: Annotated[SampleBody, Depends(json_body(SampleBody))]):
        return PlainTextResponse("OK", status_code=200)

    return app


@pytest.fixture
def sample_client():
    """TestClient for an app with a single strict-body route at /fake."""
    with TestClient(build_sample_app()) as client:
        yield client
