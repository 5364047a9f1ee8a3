"""
Tests for the demo service routes (health and echo).
"""

import pytest
from fastapi.testclient import TestClient

from jparser.main import app

client = TestClient(app)


class TestHealth:

    def test_health(self):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestEcho:
    """Tests for POST /echo"""

    def test_echo_success(self):
        response = client.post(
            "/echo",
            json={"message": "hola", "repeat": 2, "tags": ["a"], "sender": {"name": "Ana"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["echoed"] == ["hola", "hola"]
        assert data["tags"] == ["a"]
        assert data["sender"] == "Ana"

    def test_echo_defaults(self):
        response = client.post("/echo", json={"message": "hola"})

        assert response.status_code == 200
        assert response.json()["echoed"] == ["hola"]

    @pytest.mark.parametrize(
        "body, error",
        [
            (b"", "Request body must not be empty"),
            (b'{"message": "hi"', "Request body contains badly-formed JSON"),
            (b'{"message": "hi", "colour": "red"}', 'Request body contains unknown field "colour"'),
            (b'{"message": "hi"} {"message": "again"}', "Request body must only contain a single JSON object"),
            (b'{"repeat": 2}', 'Request body is missing the "message" field'),
            (
                b'{"message": "hi", "sender": {"name": 1}}',
                'Request body contains an invalid value for the "sender.name" field (at position 38)',
            ),
        ],
    )
    def test_echo_rejections(self, body, error):
        response = client.post("/echo", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"error": error}
