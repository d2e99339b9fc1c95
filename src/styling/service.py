"""
Style recommendation service.

The three operations the HTTP layer calls:

- get_matching_products: complementary products for a reference product
- get_fashion_advice: styling advice text, never any products
- process_chat_message: classify a chat message and respond

All three raise ProductNotFoundError for an unknown product id; the
route layer turns that (and anything unexpected) into an error response.
"""

import random
import threading
from typing import Optional

from config.settings import Settings, get_settings
from core.logging import get_logger
from styling.advice import AdviceGenerator
from styling.ai_client import TextCompletionClient, build_completion_client
from styling.catalog import CatalogReader, build_catalog
from styling.classifier import ChatDispatcher
from styling.colors import ColorResolver
from styling.errors import ProductNotFoundError
from styling.matcher import ProductMatcher
from styling.models import Product, RecommendationResult

logger = get_logger(__name__)


class StyleRecommendationService:
    """Orchestrates matching, advice and chat for a reference product."""

    def __init__(
        self,
        catalog: CatalogReader,
        ai_client: TextCompletionClient,
        rng: Optional[random.Random] = None,
        max_results: int = 12,
    ):
        self.catalog = catalog
        self.ai_client = ai_client
        self.matcher = ProductMatcher(
            catalog=catalog,
            color_resolver=ColorResolver(ai_client),
            rng=rng,
            max_results=max_results,
        )
        self.advice = AdviceGenerator(ai_client)
        self.chat = ChatDispatcher(self.matcher, self.advice)

    async def _load_product(self, product_id: int) -> Product:
        product = await self.catalog.get_product_by_id(product_id)
        if product is None:
            logger.info("Reference product not found", product_id=product_id)
            raise ProductNotFoundError(product_id)
        return product

    async def get_matching_products(
        self, product_id: int, category_filter: Optional[str] = None
    ) -> RecommendationResult:
        return await self.matcher.find_matches(product_id, category_filter)

    async def get_fashion_advice(
        self, product_id: int, question: Optional[str] = None
    ) -> RecommendationResult:
        reference = await self._load_product(product_id)
        text = await self.advice.generate_advice(
            color=reference.color,
            category=reference.category.name,
            product_name=reference.name,
            question=question,
        )
        return RecommendationResult(message=text, products=[])

    async def process_chat_message(self, product_id: int, user_message: str) -> RecommendationResult:
        reference = await self._load_product(product_id)
        return await self.chat.respond(reference, user_message)

    async def check_ai_connection(self) -> bool:
        return await self.ai_client.ping()


def build_style_service(settings: Settings) -> StyleRecommendationService:
    return StyleRecommendationService(
        catalog=build_catalog(settings),
        ai_client=build_completion_client(settings),
        max_results=settings.max_recommendations,
    )


# =============================================================================
# Singleton
# =============================================================================

_service: Optional[StyleRecommendationService] = None
_service_lock = threading.Lock()


def get_style_service() -> StyleRecommendationService:
    """Get or create the StyleRecommendationService singleton (thread-safe)."""
    global _service
    if _service is None:
        with _service_lock:
            if _service is None:
                _service = build_style_service(get_settings())
    return _service
