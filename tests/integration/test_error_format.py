"""Integration tests for the uniform error envelope."""

import pytest

pytestmark = pytest.mark.integration


class TestErrorEnvelope:
    def test_method_not_allowed_uses_envelope(self, api_client):
        response = api_client.delete("/api/v1/categories/some-id")
        assert response.status_code == 405
        data = response.json()
        assert set(data) == {"data", "message", "error"}
        assert data["data"] is None
        assert data["error"] == "method_not_allowed"

    def test_decode_error_uses_envelope(self, api_client):
        response = api_client.post(
            "/api/v1/categories", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert set(data) == {"data", "message", "error"}
        assert isinstance(data["error"], str)

    def test_validation_error_lists_fields(self, api_client):
        response = api_client.post("/api/v1/products", {}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert isinstance(data["error"], list)
        assert all({"field", "message", "type"} <= set(e) for e in data["error"])

    def test_non_object_body_rejected(self, api_client):
        response = api_client.post(
            "/api/v1/products", data="[1, 2]", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Request body must be a JSON object."

    def test_unknown_route_uses_envelope(self, api_client):
        response = api_client.get("/api/v1/warehouses")
        assert response.status_code == 404
        assert response.json() == {"data": None, "message": "Not found.", "error": None}
