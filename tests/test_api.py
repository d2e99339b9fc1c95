"""
Tests for the style assistant HTTP API.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from styling.ai_client import StubCompletionClient
from styling.service import StyleRecommendationService, get_style_service


def _ids(body):
    return sorted(p["productId"] for p in body["recommendedProducts"])


# =============================================================================
# POST /recommendations
# =============================================================================

class TestRecommendations:

    def test_success_shape(self, test_client):
        response = test_client.post("/recommendations", json={"productId": 5})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Here are some items that pair well with your RED Wool Blazer:"
        assert set(body) == {"success", "message", "recommendedProducts"}

        product = body["recommendedProducts"][0]
        assert set(product) == {"productId", "name", "color", "price", "imageUrl", "categoryName"}

    def test_fallback_palette_results(self, test_client):
        body = test_client.post("/recommendations", json={"productId": 5}).json()
        assert _ids(body) == [1, 2, 3, 4]

    def test_product_fields(self, test_client):
        body = test_client.post("/recommendations", json={"productId": 5, "categoryFilter": "bags"}).json()
        by_id = {p["productId"]: p for p in body["recommendedProducts"]}
        assert by_id[2] == {
            "productId": 2,
            "name": "Mini Crossbody",
            "color": "red",
            "price": 49.99,
            "imageUrl": "/images/products/2.jpg",
            "categoryName": "BAGS",
        }

    def test_category_filter(self, test_client):
        body = test_client.post("/recommendations", json={"productId": 5, "categoryFilter": "shirts"}).json()
        assert body["success"] is True
        assert _ids(body) == [3, 4]

    def test_incompatible_filter_is_not_an_error(self, test_client):
        response = test_client.post("/recommendations", json={"productId": 5, "categoryFilter": "shoes"})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["recommendedProducts"] == []
        assert body["message"].startswith("Sorry, shoes")

    def test_unknown_product(self, test_client):
        response = test_client.post("/recommendations", json={"productId": 999})
        assert response.status_code == 400

        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Error getting recommendations: Product 999 not found"
        assert body["recommendedProducts"] == []

    def test_unexpected_error(self, app):
        from fastapi.testclient import TestClient

        broken = MagicMock()
        broken.get_matching_products = AsyncMock(side_effect=RuntimeError("catalog unavailable"))
        app.dependency_overrides[get_style_service] = lambda: broken

        response = TestClient(app).post("/recommendations", json={"productId": 5})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Error getting recommendations: catalog unavailable"

    def test_missing_product_id_is_validation_error(self, test_client):
        response = test_client.post("/recommendations", json={})
        assert response.status_code == 422

    def test_snake_case_body_accepted(self, test_client):
        response = test_client.post("/recommendations", json={"product_id": 5})
        assert response.status_code == 200

    def test_request_id_header(self, test_client):
        response = test_client.post(
            "/recommendations", json={"productId": 5}, headers={"X-Request-ID": "req-42"}
        )
        assert response.headers["X-Request-ID"] == "req-42"


# =============================================================================
# POST /chat
# =============================================================================

class TestChat:

    def test_greeting(self, test_client):
        body = test_client.post("/chat", json={"productId": 5, "userMessage": "Hi there"}).json()
        assert body["success"] is True
        assert body["recommendedProducts"] == []
        assert "Wool Blazer" in body["message"]

    def test_category_request(self, test_client):
        body = test_client.post("/chat", json={"productId": 5, "userMessage": "show me bags"}).json()
        assert body["success"] is True
        assert _ids(body) == [1, 2]

    def test_empty_message_gets_advice(self, test_client):
        body = test_client.post("/chat", json={"productId": 5, "userMessage": ""}).json()
        assert body["success"] is True
        assert body["recommendedProducts"] == []
        assert "Jewelry & Accessories" in body["message"]

    def test_missing_message_gets_advice(self, test_client):
        body = test_client.post("/chat", json={"productId": 5}).json()
        assert "Jewelry & Accessories" in body["message"]

    @pytest.mark.parametrize("message", ["Any style tips?", "FASHION TIPS please, show me bags"])
    def test_tips_request_gets_advice(self, test_client, message):
        body = test_client.post("/chat", json={"productId": 5, "userMessage": message}).json()
        assert body["recommendedProducts"] == []
        assert "Jewelry & Accessories" in body["message"]

    def test_tips_question_reaches_ai(self, app, catalog):
        from fastapi.testclient import TestClient

        ai = StubCompletionClient(["Layer it over a silk camisole."])
        app.dependency_overrides[get_style_service] = lambda: StyleRecommendationService(catalog, ai)

        body = TestClient(app).post("/chat", json={"productId": 5, "userMessage": "style tips for work?"}).json()
        assert body["message"] == "Layer it over a silk camisole."
        assert "style tips for work?" in ai.prompts[0]

    def test_unknown_product(self, test_client):
        response = test_client.post("/chat", json={"productId": 999, "userMessage": "hello"})
        assert response.status_code == 400

        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Error processing chat message: Product 999 not found"
        assert body["recommendedProducts"] == []


# =============================================================================
# Health
# =============================================================================

class TestHealth:

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "style-assistant"}

    def test_live(self, test_client):
        assert test_client.get("/live").json() == {"status": "alive"}

    def test_detailed(self, test_client):
        response = test_client.get("/health/detailed")
        assert response.status_code == 200

        body = response.json()
        assert body["status"] in ("healthy", "degraded")
        assert body["checks"]["catalog"]["status"] == "connected"
        assert body["checks"]["ai"]["status"] in ("stub", "connected", "error")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
