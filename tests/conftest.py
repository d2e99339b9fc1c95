"""
Pytest configuration and shared fixtures for the style assistant tests.
"""
import os
import random
import sys
from decimal import Decimal
from typing import Dict, List

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

from styling.ai_client import StubCompletionClient
from styling.catalog import InMemoryCatalog
from styling.models import Category, Product
from styling.service import StyleRecommendationService


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def categories() -> Dict[str, Category]:
    """Catalog categories keyed by name."""
    names = ["BAGS", "BLAZERS", "SHIRTS", "SHOES", "SKIRTS", "T-SHIRT/TOPS", "TRENDING"]
    return {
        name: Category(category_id=i + 1, name=name, description=f"{name.title()} collection")
        for i, name in enumerate(names)
    }


def make_product(product_id: int, name: str, color: str, category: Category, price: str = "49.99") -> Product:
    return Product(
        product_id=product_id,
        name=name,
        price=Decimal(price),
        color=color,
        category=category,
        description=f"{name} description",
        image_url=f"/images/products/{product_id}.jpg",
        size="M",
    )


@pytest.fixture
def product_factory():
    """Factory for extra products in individual tests."""
    return make_product


@pytest.fixture
def reference_product(categories) -> Product:
    """The red blazer most tests anchor on (id=5)."""
    return make_product(5, "Wool Blazer", "RED", categories["BLAZERS"], price="129.00")


@pytest.fixture
def sample_products(categories, reference_product) -> List[Product]:
    """
    Reference blazer plus a small catalog.

    With the fallback palette (RED + BLACK/WHITE/GRAY/NAVY/BEIGE) the blazer
    matches exactly ids 1, 2, 3 and 4: BAGS and SHIRTS in RED/BLACK/WHITE.
    """
    return [
        make_product(1, "Leather Tote", "BLACK", categories["BAGS"]),
        make_product(2, "Mini Crossbody", "red", categories["BAGS"]),
        make_product(3, "Oxford Shirt", "WHITE", categories["SHIRTS"]),
        make_product(4, "Silk Shirt", "Black", categories["SHIRTS"]),
        reference_product,
        make_product(6, "Chelsea Boots", "BLACK", categories["SHOES"]),
        make_product(7, "Tailored Blazer", "BLACK", categories["BLAZERS"]),
        make_product(8, "Pleated Skirt", "GREEN", categories["SKIRTS"]),
        make_product(9, "Crop Top", "PURPLE", categories["T-SHIRT/TOPS"]),
        make_product(10, "Statement Tee", "WHITE", categories["TRENDING"]),
    ]


@pytest.fixture
def catalog(sample_products) -> InMemoryCatalog:
    return InMemoryCatalog(sample_products)


@pytest.fixture
def failing_ai() -> StubCompletionClient:
    """AI client that fails every call, forcing the static fallbacks."""
    return StubCompletionClient()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def service(catalog, failing_ai, rng) -> StyleRecommendationService:
    return StyleRecommendationService(catalog=catalog, ai_client=failing_ai, rng=rng)


# ============================================================================
# Fixtures: FastAPI Test Client
# ============================================================================

@pytest.fixture
def app(service):
    """FastAPI application wired to the in-memory service."""
    from api.app import create_app
    from styling.service import get_style_service

    application = create_app()
    application.dependency_overrides[get_style_service] = lambda: service
    return application


@pytest.fixture
def test_client(app):
    from fastapi.testclient import TestClient
    return TestClient(app)

