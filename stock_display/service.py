"""
Stock service - composes the stock facade reads into a cached summary per SKU.
"""

from typing import Optional
import logging
from pydantic import ValidationError
from stock_display.models import StockSummary
from stock_display.data.catalog import InventoryCatalog
from stock_display.layout.stock_provider import StockProvider
from stock_display.core.cache import RedisCache, cache as default_cache

logger = logging.getLogger(__name__)


class StockService:
    """
    Service layer for stock lookups by SKU.
    """

    def __init__(
        self,
        stock_provider: StockProvider,
        catalog: InventoryCatalog,
        cache: Optional[RedisCache] = None
    ):
        self.stock_provider = stock_provider
        self.catalog = catalog
        self.cache = cache if cache is not None else default_cache

    def build_summary(self, sku: str) -> Optional[StockSummary]:
        """
        Compute the stock summary for a SKU straight from the inventory collaborators.

        Returns:
            StockSummary, or None if the SKU is not in the catalog
        """
        product = self.catalog.find_product_by_sku(sku)
        if product is None:
            logger.info(f"SKU {sku} not found in catalog")
            return None

        return StockSummary(
            sku=product.sku,
            product_id=product.id,
            quantity=self.stock_provider.get_available_stock(product),
            in_stock=self.stock_provider.is_in_stock(product),
            message=self.stock_provider.get_stock_message(product),
            low_inventory=self.stock_provider.is_low_inventory(product),
        )

    async def get_stock_summary(self, sku: str, refresh: bool = False) -> Optional[StockSummary]:
        """
        Get the stock summary for a SKU.

        1. Check Redis cache (unless refresh is set)
        2. Compute the summary through the stock facade
        3. Save to Redis cache

        Args:
            sku: Product SKU
            refresh: Skip the cache lookup and recompute

        Returns:
            StockSummary or None if the SKU is unknown
        """
        if not refresh:
            cached_data = await self.cache.get_summary(sku)
            if cached_data:
                try:
                    summary = StockSummary.model_validate(cached_data)
                    logger.debug(f"Returning cached stock summary for SKU: {sku}")
                    return summary
                except ValidationError as e:
                    logger.warning(f"Discarding invalid cached stock summary for SKU {sku}: {str(e)}")

        summary = self.build_summary(sku)
        if summary is None:
            return None

        await self.cache.store_summary(sku, summary.model_dump(mode='json'))
        return summary
