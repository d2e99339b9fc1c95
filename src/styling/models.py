"""
Domain models for the style assistant.

Products and categories are read-only snapshots of catalog rows; the
recommendation result and classified intent are created per request.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional


# =============================================================================
# Catalog Records
# =============================================================================

@dataclass(frozen=True)
class Category:
    """Catalog category. Names come from a fixed uppercase vocabulary."""

    category_id: int
    name: str
    description: str = ""

    @property
    def key(self) -> str:
        return self.name.strip().upper()


@dataclass(frozen=True)
class Product:
    """Catalog product with its category eagerly attached."""

    product_id: int
    name: str
    price: Decimal
    color: str
    category: Category
    description: str = ""
    image_url: str = ""
    size: str = ""

    @property
    def color_key(self) -> str:
        return self.color.strip().upper()

    @property
    def category_key(self) -> str:
        return self.category.key

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "Product":
        """
        Build a Product from a catalog row.

        Accepts both the Supabase shape (snake_case columns with an embedded
        ``categories`` object) and the seed-file shape (``category`` object
        or ``category_name`` string).
        """
        cat = row.get("categories") or row.get("category") or {}
        if isinstance(cat, str):
            cat = {"name": cat}
        category = Category(
            category_id=int(cat.get("category_id") or row.get("category_id") or 0),
            name=str(cat.get("name") or row.get("category_name") or ""),
            description=str(cat.get("description") or ""),
        )
        return cls(
            product_id=int(row["product_id"]),
            name=str(row.get("name") or ""),
            price=Decimal(str(row.get("price") or 0)),
            color=str(row.get("color") or ""),
            category=category,
            description=str(row.get("description") or ""),
            image_url=str(row.get("image_url") or ""),
            size=str(row.get("size") or ""),
        )


@dataclass(frozen=True)
class ProductSummary:
    """The product fields returned to clients."""

    product_id: int
    name: str
    color: str
    price: Decimal
    image_url: str
    category_name: Optional[str]

    @classmethod
    def from_product(cls, product: Product) -> "ProductSummary":
        return cls(
            product_id=product.product_id,
            name=product.name,
            color=product.color,
            price=product.price,
            image_url=product.image_url,
            category_name=product.category.name or None,
        )


# =============================================================================
# Per-request Results
# =============================================================================

@dataclass
class RecommendationResult:
    """Message plus an ordered, bounded list of products."""

    message: str
    products: List[Product] = field(default_factory=list)

    def summaries(self) -> List[ProductSummary]:
        return [ProductSummary.from_product(p) for p in self.products]


class IntentKind(str, Enum):
    """Classification of a free-text chat message."""
    GREETING = "greeting"
    THANKS = "thanks"
    GOODBYE = "goodbye"
    CATEGORY_REQUEST = "category_request"
    OPEN_QUESTION = "open_question"


@dataclass(frozen=True)
class ClassifiedIntent:
    """
    Result of classifying a chat message.

    ``category`` is set only for CATEGORY_REQUEST, ``text`` only for
    OPEN_QUESTION.
    """

    kind: IntentKind
    category: Optional[str] = None
    text: Optional[str] = None
