"""
Catalog read access.

The style assistant never writes to the catalog. Two readers share the
CatalogReader interface:

- SupabaseCatalog: ``products`` rows with their ``categories`` row
  embedded, read through the async Supabase client.
- InMemoryCatalog: an immutable tuple of products, used for tests and
  local runs from a JSON seed file.

Category and color comparisons are case-insensitive (uppercase keys).
"""

import json
from pathlib import Path
from typing import Any, Collection, Dict, Iterable, List, Optional, Protocol, Tuple

from supabase import AsyncClient

from config.settings import Settings
from core.logging import get_logger
from styling.models import Product

logger = get_logger(__name__)


class CatalogReader(Protocol):
    """Read interface over the product catalog."""

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        ...

    async def find_products(
        self,
        exclude_id: int,
        categories: Collection[str],
        colors: Collection[str],
    ) -> List[Product]:
        ...

    async def ping(self) -> bool:
        ...


def _upper_set(values: Iterable[str]) -> set:
    return {v.strip().upper() for v in values if v and v.strip()}


def matches(product: Product, exclude_id: int, categories: set, colors: set) -> bool:
    """Predicate shared by both readers. ``categories``/``colors`` are uppercase."""
    return (
        product.product_id != exclude_id
        and product.category_key in categories
        and product.color_key in colors
    )


# =============================================================================
# Supabase
# =============================================================================

_PRODUCT_SELECT = (
    "product_id, name, description, price, color, image_url, size, category_id, "
    "categories!inner(category_id, name, description)"
)


class SupabaseCatalog:
    """Catalog reader backed by Supabase (PostgREST)."""

    def __init__(self, client: Optional[AsyncClient] = None):
        self._client = client

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            from config.database import get_supabase_client
            self._client = await get_supabase_client()
        return self._client

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        client = await self._get_client()
        result = await (
            client.table("products")
            .select(_PRODUCT_SELECT)
            .eq("product_id", product_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return Product.from_record(result.data[0])

    async def find_products(
        self,
        exclude_id: int,
        categories: Collection[str],
        colors: Collection[str],
    ) -> List[Product]:
        wanted_categories = _upper_set(categories)
        wanted_colors = _upper_set(colors)
        if not wanted_categories or not wanted_colors:
            return []

        client = await self._get_client()
        # Category names are stored uppercase; colors are free text, so the
        # color comparison happens here rather than in the query.
        result = await (
            client.table("products")
            .select(_PRODUCT_SELECT)
            .neq("product_id", exclude_id)
            .in_("categories.name", sorted(wanted_categories))
            .execute()
        )
        products = [Product.from_record(row) for row in (result.data or [])]
        return [p for p in products if matches(p, exclude_id, wanted_categories, wanted_colors)]

    async def ping(self) -> bool:
        if self._client is None:
            from config.database import get_supabase_client_optional
            self._client = await get_supabase_client_optional()
            if self._client is None:
                logger.warning("Catalog connectivity check failed", error="Supabase client unavailable")
                return False
        try:
            await self._client.table("products").select("product_id").limit(1).execute()
            return True
        except Exception as e:
            logger.warning("Catalog connectivity check failed", error=str(e))
            return False


# =============================================================================
# In-memory
# =============================================================================

class InMemoryCatalog:
    """Catalog reader over a fixed set of products."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {p.product_id: p for p in self._products}

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "InMemoryCatalog":
        return cls(Product.from_record(r) for r in records)

    @classmethod
    def from_json(cls, path: Path) -> "InMemoryCatalog":
        """Load a JSON array of product records (see Product.from_record)."""
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError(f"Catalog seed file must contain a JSON array: {path}")
        catalog = cls.from_records(records)
        logger.info("Loaded in-memory catalog", path=str(path), products=len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._products)

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    async def find_products(
        self,
        exclude_id: int,
        categories: Collection[str],
        colors: Collection[str],
    ) -> List[Product]:
        wanted_categories = _upper_set(categories)
        wanted_colors = _upper_set(colors)
        return [p for p in self._products if matches(p, exclude_id, wanted_categories, wanted_colors)]

    async def ping(self) -> bool:
        return True


def build_catalog(settings: Settings) -> CatalogReader:
    """Create the catalog reader selected by ``catalog_backend``."""
    if settings.catalog_backend == "memory":
        if settings.catalog_seed_path:
            return InMemoryCatalog.from_json(settings.catalog_seed_path)
        logger.warning("In-memory catalog has no seed file, catalog is empty")
        return InMemoryCatalog()
    return SupabaseCatalog()
