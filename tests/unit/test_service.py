"""
Tests for StyleRecommendationService.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

import styling.service as service_module
from config.settings import get_settings_for_testing
from styling.ai_client import StubCompletionClient
from styling.catalog import InMemoryCatalog
from styling.errors import ProductNotFoundError
from styling.models import RecommendationResult
from styling.service import StyleRecommendationService, build_style_service


def run(coro):
    return asyncio.run(coro)


class TestGetMatchingProducts:

    def test_returns_matches(self, service):
        result = run(service.get_matching_products(5))
        assert sorted(p.product_id for p in result.products) == [1, 2, 3, 4]
        assert "Wool Blazer" in result.message

    def test_with_filter(self, service):
        result = run(service.get_matching_products(5, "shirts"))
        assert sorted(p.product_id for p in result.products) == [3, 4]

    def test_unknown_product(self, service):
        with pytest.raises(ProductNotFoundError):
            run(service.get_matching_products(999))

    def test_delegates_to_matcher(self, service, monkeypatch):
        find_matches = AsyncMock(return_value=RecommendationResult(message="ok"))
        monkeypatch.setattr(service.matcher, "find_matches", find_matches)

        assert run(service.get_matching_products(5, "bags")).message == "ok"
        find_matches.assert_awaited_once_with(5, "bags")

    def test_filtered_empty_result_names_filter(self, service):
        result = run(service.get_matching_products(5, "skirts"))
        assert result.products == []
        assert "skirts" in result.message

    def test_summaries_keep_original_casing(self, service):
        summaries = run(service.get_matching_products(5)).summaries()
        by_id = {s.product_id: s for s in summaries}
        assert by_id[2].color == "red"
        assert by_id[1].category_name == "BAGS"
        assert by_id[1].image_url == "/images/products/1.jpg"


class TestGetFashionAdvice:

    def test_never_returns_products(self, service):
        result = run(service.get_fashion_advice(5, "What shoes go with it?"))
        assert result.products == []
        assert result.message

    def test_uses_ai_when_available(self, catalog, rng):
        ai = StubCompletionClient(["Wear it with white sneakers."])
        service = StyleRecommendationService(catalog=catalog, ai_client=ai, rng=rng)
        result = run(service.get_fashion_advice(5))
        assert result.message == "Wear it with white sneakers."
        assert "Wool Blazer" in ai.prompts[0]

    def test_unknown_product(self, service):
        with pytest.raises(ProductNotFoundError):
            run(service.get_fashion_advice(999))


class TestProcessChatMessage:

    def test_greeting(self, service):
        result = run(service.process_chat_message(5, "hello"))
        assert result.products == []
        assert result.message.startswith("Hello!")

    def test_category_request(self, service):
        result = run(service.process_chat_message(5, "show me bags"))
        assert sorted(p.product_id for p in result.products) == [1, 2]

    def test_unknown_product(self, service):
        with pytest.raises(ProductNotFoundError):
            run(service.process_chat_message(999, "hello"))


class TestCheckAiConnection:

    def test_failing_stub(self, service):
        assert run(service.check_ai_connection()) is False

    def test_available_stub(self, catalog):
        service = StyleRecommendationService(catalog=catalog, ai_client=StubCompletionClient(default="ok"))
        assert run(service.check_ai_connection()) is True


class TestBuildStyleService:

    def test_builds_from_settings(self):
        settings = get_settings_for_testing(max_recommendations=5)
        service = build_style_service(settings)
        assert isinstance(service.catalog, InMemoryCatalog)
        assert isinstance(service.ai_client, StubCompletionClient)

    def test_singleton(self, monkeypatch):
        monkeypatch.setattr(service_module, "_service", None)
        monkeypatch.setattr(service_module, "get_settings", lambda: get_settings_for_testing())
        first = service_module.get_style_service()
        assert service_module.get_style_service() is first
