"""
End-to-end tests for strict request body decoding over HTTP.

Each test posts a raw body to /fake (shape: Str, wire name "str") and checks
the status code and the {"error": ...} payload.
"""

import pytest


def post(client, body: bytes):
    return client.post("/fake", content=body, headers={"Content-Type": "application/json"})


class TestParseJSONRequest:
    """Tests for POST /fake"""

    def test_ok(self, sample_client):
        response = post(sample_client, b'{\n\t\t\t"str": "test string"\n\t\t}')

        assert response.status_code == 200
        assert response.text == "OK"

    def test_badly_formed(self, sample_client):
        response = post(sample_client, b"test string")

        assert response.status_code == 400
        assert response.json() == {"error": "Request body contains badly-formed JSON (at position 2)"}

    def test_badly_formed_eof(self, sample_client):
        response = post(sample_client, b'{\n\t\t\t"str": "test string"\n\t\t')

        assert response.status_code == 400
        assert response.json() == {"error": "Request body contains badly-formed JSON"}

    def test_unmarshal_error(self, sample_client):
        response = post(sample_client, b'{\n\t\t\t"str": 2\n\t\t}')

        assert response.status_code == 400
        assert response.json() == {
            "error": 'Request body contains an invalid value for the "Str" field (at position 13)'
        }

    def test_unknown_field(self, sample_client):
        response = post(
            sample_client,
            b'{\n\t\t\t"str": "test string",\n\t\t\t"other field": "shouldn\'t be here"\n\t\t}',
        )

        assert response.status_code == 400
        assert response.json() == {"error": 'Request body contains unknown field "other field"'}

    @pytest.mark.parametrize("body", [b"", b"   \n\t  "])
    def test_empty_json(self, sample_client, body):
        response = post(sample_client, body)

        assert response.status_code == 400
        assert response.json() == {"error": "Request body must not be empty"}

    def test_multiple_objects(self, sample_client):
        response = post(
            sample_client,
            b'{\n\t\t\t"str": "test string"\n\t\t}\n\t\t{\n\t\t\t"str": "test string"\n\t\t}',
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Request body must only contain a single JSON object"}

    def test_error_payload_has_only_error_key(self, sample_client):
        response = post(sample_client, b'{"str": 1}')

        assert list(response.json().keys()) == ["error"]
        assert response.headers["content-type"] == "application/json"

    def test_non_json_literal_is_a_syntax_error(self, sample_client):
        response = post(sample_client, b'{"str": NaN}')

        assert response.status_code == 400
        assert response.json()["error"].startswith("Request body contains badly-formed JSON (at position ")

    def test_rejection_logged_through_shared_logger(self, sample_client):
        from jparser import error_handlers

        response = post(sample_client, b'{"str": "x", "Str": "y"}')

        assert response.json() == {"error": 'Request body contains unknown field "Str"'}
        assert len(error_handlers.logger.handlers) == 1
