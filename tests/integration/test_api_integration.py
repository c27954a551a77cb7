"""
Integration tests for the assembled application (bundled data + static client)
"""

import pytest
from fastapi.testclient import TestClient

from api.app import app, create_app
from quote_store import create_quote_store


@pytest.mark.integration
class TestAPIIntegration:
    """Integration tests for API endpoints"""

    @pytest.fixture
    def client(self):
        """Client over a freshly loaded copy of the bundled data"""
        return TestClient(create_app(store=create_quote_store(), serve_static=True))

    def test_module_app_serves_bundled_quotes(self):
        client = TestClient(app)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["quotesLoaded"] == len(app.state.quote_store)

    def test_static_client_served_at_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "script.js" in response.text

        script = client.get("/script.js")
        assert script.status_code == 200
        assert "/api/quotes/random" in script.text

    def test_unmatched_route_behind_static_mount(self, client):
        response = client.get("/non-existent-route")
        assert response.status_code == 404
        assert response.json() == {"error": "Route not found", "path": "/non-existent-route"}

    def test_unmatched_post_behind_static_mount(self, client):
        response = client.post("/somewhere", json={})
        assert response.status_code == 404
        assert response.json()["error"] == "Route not found"

    def test_api_cors_integration(self, client):
        """Test CORS headers integration"""
        response = client.options("/api/quotes", headers={
            "Origin": "http://localhost:8080",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Content-Type"
        })
        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

        response = client.get("/api/categories", headers={"Origin": "http://localhost:8080"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_openapi_docs_available(self, client):
        response = client.get("/openapi.json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/quotes" in paths
        assert "/api/quotes/category/{category}" in paths

    def test_complete_quote_workflow(self, client):
        """List, create, fetch by id and category, then check totals"""
        listing = client.get("/api/quotes?limit=1").json()
        total = listing["total"]
        assert listing["totalPages"] == total

        new_quote = {
            "text": "Test quote for testing",
            "author": "Test Author",
            "category": "testing"
        }
        created = client.post("/api/quotes", json=new_quote)
        assert created.status_code == 201
        assert created.json() == {"id": total + 1, **new_quote}

        assert client.get(f"/api/quotes/{total + 1}").json() == created.json()

        by_category = client.get("/api/quotes/category/Testing").json()
        assert by_category["category"] == "testing"
        assert by_category["quotes"] == [created.json()]

        categories = client.get("/api/categories").json()["categories"]
        assert categories.count("testing") == 1

        assert client.get("/health").json()["quotesLoaded"] == total + 1

        last_page = client.get(f"/api/quotes?page={total + 1}&limit=1").json()
        assert last_page["quotes"] == [created.json()]
