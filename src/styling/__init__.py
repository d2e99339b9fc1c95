"""
Style assistant core.

Category compatibility, color coordination, product matching, chat
classification and advice generation behind StyleRecommendationService.
"""

from styling.errors import CompletionError, ProductNotFoundError, StyleAssistantError
from styling.models import (
    Category,
    ClassifiedIntent,
    IntentKind,
    Product,
    ProductSummary,
    RecommendationResult,
)
from styling.service import StyleRecommendationService, get_style_service

__all__ = [
    "Category",
    "ClassifiedIntent",
    "CompletionError",
    "IntentKind",
    "Product",
    "ProductNotFoundError",
    "ProductSummary",
    "RecommendationResult",
    "StyleAssistantError",
    "StyleRecommendationService",
    "get_style_service",
]
