"""
Request and response bodies for the style assistant API.

JSON uses camelCase keys (productId, categoryFilter, recommendedProducts);
Python attributes stay snake_case.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from styling.models import ProductSummary, RecommendationResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Requests
# ============================================================================

class RecommendationRequest(_CamelModel):
    """Body of POST /recommendations."""
    product_id: int = Field(..., description="Reference product id")
    category_filter: Optional[str] = Field(None, description="Only recommend this category, e.g. 'shoes'")


class ChatRequest(_CamelModel):
    """Body of POST /chat."""
    product_id: int = Field(..., description="Reference product id")
    user_message: str = Field("", description="Free-text shopper message")


# ============================================================================
# Responses
# ============================================================================

class RecommendedProduct(_CamelModel):
    product_id: int
    name: str
    color: str
    price: float
    image_url: str
    category_name: Optional[str] = None

    @classmethod
    def from_summary(cls, summary: ProductSummary) -> "RecommendedProduct":
        return cls(
            product_id=summary.product_id,
            name=summary.name,
            color=summary.color,
            price=float(summary.price),
            image_url=summary.image_url,
            category_name=summary.category_name,
        )


class StyleAssistantResponse(_CamelModel):
    """Shared response shape for recommendations and chat."""
    success: bool
    message: str
    recommended_products: List[RecommendedProduct] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: RecommendationResult) -> "StyleAssistantResponse":
        return cls(
            success=True,
            message=result.message,
            recommended_products=[RecommendedProduct.from_summary(s) for s in result.summaries()],
        )

    @classmethod
    def failure(cls, message: str) -> "StyleAssistantResponse":
        return cls(success=False, message=message, recommended_products=[])
