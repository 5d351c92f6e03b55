"""
Background jobs for the stock summary cache.

Recomputes the stock summary of catalog products and stores it in Redis so
requests hit a warm cache.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, Optional
from stock_display.core.config import settings, Settings
from stock_display.core.cache import cache
from stock_display.core.wiring import build_container, STOCK_PROVIDER_ID, CATALOG_ID
from stock_display.data.catalog import InventoryCatalog
from stock_display.service import StockService

logger = logging.getLogger(__name__)


class StockPrewarmJob:
    """
    Prewarms cached stock summaries.
    The catalog and container are built lazily on first run.
    """

    def __init__(self, config: Optional[Settings] = None, service: Optional[StockService] = None):
        self.config = config or settings
        self.service = service

    async def _get_service(self) -> StockService:
        if self.service is None:
            catalog = await InventoryCatalog(self.config.catalog_path).load()
            container = build_container(catalog)
            self.service = StockService(
                stock_provider=container.get(STOCK_PROVIDER_ID),
                catalog=container.get(CATALOG_ID),
            )
        return self.service

    async def prewarm(self, skus: Optional[Iterable[str]] = None) -> Dict[str, int]:
        """
        Recompute and cache stock summaries.

        Args:
            skus: SKUs to refresh (default: every catalog product)

        Returns:
            Counts of prewarmed, missing and failed SKUs
        """
        service = await self._get_service()
        if skus is None:
            skus = [product.sku for product in service.catalog.products()]

        counts = {"prewarmed": 0, "missing": 0, "failed": 0}
        for sku in skus:
            try:
                summary = await service.get_stock_summary(sku, refresh=True)
            except Exception as e:
                counts["failed"] += 1
                logger.error(f"Failed to prewarm {sku}: {str(e)}")
                continue

            if summary is None:
                counts["missing"] += 1
                logger.debug(f"SKU {sku} not in catalog (skipped)")
            else:
                counts["prewarmed"] += 1

        logger.info(
            f"Stock cache prewarming complete: {counts['prewarmed']} prewarmed, "
            f"{counts['missing']} missing, {counts['failed']} failed"
        )
        return counts

    async def run_scheduled_job(self, skus: Optional[Iterable[str]] = None) -> Dict[str, int]:
        logger.info(f"Running stock prewarm job at {datetime.utcnow().isoformat()}")

        connected_here = False
        if self.config.cache_enabled and not cache.connected:
            await cache.connect()
            connected_here = True

        try:
            return await self.prewarm(skus)
        finally:
            if connected_here:
                await cache.disconnect()


stock_prewarm_job = StockPrewarmJob()
