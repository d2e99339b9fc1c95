"""
Product matcher.

Finds catalog products that complement a reference product:

1. compatible categories for the reference category (compatibility graph)
2. optional narrowing by a requested category (bidirectional substring)
3. color set = reference color + AI/fallback coordinating colors
4. catalog query excluding the reference product
5. uniform shuffle, truncated to the recommendation cap
"""

import random
from typing import List, Optional, Sequence, Tuple

from config.constants import MAX_RECOMMENDATIONS
from core.logging import get_logger
from styling.catalog import CatalogReader
from styling.colors import ColorResolver
from styling.compatibility import compatible_categories
from styling.errors import ProductNotFoundError
from styling.models import Product, RecommendationResult

logger = get_logger(__name__)


def narrow_categories(compatible: Sequence[str], category_filter: str) -> Tuple[str, ...]:
    """
    Keep compatible categories that match the filter in either direction.

    "shoes" keeps SHOES, "dresses/jumpsuits" keeps DRESSES/JUMPSUITS and
    "top" keeps T-SHIRT/TOPS. Short filters can match more than intended;
    that is accepted behavior.
    """
    wanted = category_filter.strip().upper()
    return tuple(c for c in compatible if wanted in c.upper() or c.upper() in wanted)


def resolve_color_set(reference_color: str, suggestions: Sequence[str]) -> List[str]:
    """Reference color first, then suggestions, uppercase and deduplicated."""
    colors: List[str] = []
    for color in [reference_color, *suggestions]:
        key = color.strip().upper()
        if key and key not in colors:
            colors.append(key)
    return colors


class ProductMatcher:
    """Builds complementary product recommendations for a reference product."""

    def __init__(
        self,
        catalog: CatalogReader,
        color_resolver: ColorResolver,
        rng: Optional[random.Random] = None,
        max_results: int = MAX_RECOMMENDATIONS,
    ):
        self._catalog = catalog
        self._colors = color_resolver
        self._rng = rng or random.Random()
        self._max_results = min(max_results, MAX_RECOMMENDATIONS)

    async def find_matches(
        self, product_id: int, category_filter: Optional[str] = None
    ) -> RecommendationResult:
        """Load the reference product and match it. Raises ProductNotFoundError."""
        reference = await self._catalog.get_product_by_id(product_id)
        if reference is None:
            raise ProductNotFoundError(product_id)
        return await self.match_product(reference, category_filter)

    async def match_product(
        self, reference: Product, category_filter: Optional[str] = None
    ) -> RecommendationResult:
        category_filter = (category_filter or "").strip() or None
        compatible = compatible_categories(reference.category_key)

        if category_filter:
            compatible = narrow_categories(compatible, category_filter)
            if not compatible:
                logger.info(
                    "Category filter matches no compatible category",
                    product_id=reference.product_id,
                    reference_category=reference.category_key,
                    category_filter=category_filter,
                )
                return RecommendationResult(
                    message=(
                        f"Sorry, {category_filter.lower()} aren't something we pair with "
                        f"{reference.category_key.lower()}. Try asking for another category."
                    ),
                    products=[],
                )

        suggestions = await self._colors.suggest_colors(reference.color)
        colors = resolve_color_set(reference.color, suggestions)

        candidates = await self._catalog.find_products(
            exclude_id=reference.product_id,
            categories=compatible,
            colors=colors,
        )
        candidates = list(candidates)
        self._rng.shuffle(candidates)
        selected = candidates[: self._max_results]

        logger.info(
            "Matched products",
            product_id=reference.product_id,
            categories=list(compatible),
            colors=colors,
            candidates=len(candidates),
            returned=len(selected),
        )

        return RecommendationResult(
            message=self._compose_message(reference, category_filter, bool(selected)),
            products=selected,
        )

    @staticmethod
    def _compose_message(reference: Product, category_filter: Optional[str], found: bool) -> str:
        subject = f"your {reference.color_key} {reference.name}"
        items = category_filter.lower() if category_filter else "items"
        if not found:
            return f"I couldn't find any {items} to pair with {subject} right now."
        return f"Here are some {items} that pair well with {subject}:"
