"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "inscriptions-api"
        assert schema["info"]["version"] == "1.0.0"

    def test_collection_operations(self, schema: dict) -> None:
        """POST and GET are documented on /inscriptions."""
        collection = schema["paths"]["/inscriptions"]
        assert collection["post"]["summary"] == "Create an inscription"
        assert collection["get"]["summary"] == "List inscriptions"

    def test_item_operations(self, schema: dict) -> None:
        """GET, PUT and DELETE are documented on /inscriptions/{inscription_id}."""
        item = schema["paths"]["/inscriptions/{inscription_id}"]
        assert set(item) >= {"get", "put", "delete"}

    def test_search_parameter_documented(self, schema: dict) -> None:
        params = schema["paths"]["/inscriptions"]["get"]["parameters"]
        assert [p["name"] for p in params] == ["search"]
        assert params[0]["required"] is False

    def test_request_schema(self, schema: dict) -> None:
        """InscriptionRequest requires name, contact and email."""
        request = schema["components"]["schemas"]["InscriptionRequest"]
        assert set(request["required"]) == {"name", "contact", "email"}

    def test_error_responses_documented(self, schema: dict) -> None:
        delete = schema["paths"]["/inscriptions/{inscription_id}"]["delete"]
        assert "404" in delete["responses"]
        assert "204" in delete["responses"]

    def test_endpoints_tagged(self, schema: dict) -> None:
        assert "inscriptions" in [t["name"] for t in schema.get("tags", [])]
        assert "inscriptions" in schema["paths"]["/inscriptions"]["post"]["tags"]


class TestSwaggerUI:
    """Tests for Swagger UI availability."""

    def test_docs_endpoint_accessible(self, client: TestClient) -> None:
        """Swagger UI is accessible at /docs."""
        response = client.get("/docs")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "swagger" in response.text.lower()
