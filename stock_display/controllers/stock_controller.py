"""
Stock Controller.
Orchestrates the flow between the router, service, and view.
"""

from fastapi import HTTPException
import logging
import re
from stock_display.service import StockService
from stock_display.models import StockSummary

logger = logging.getLogger(__name__)

SKU_PATTERN = re.compile(r'^[A-Za-z0-9-]{3,32}$')


class StockController:
    """
    Controller for stock related operations.
    """

    def __init__(self, service: StockService):
        self.service = service

    def _validate_sku(self, sku: str) -> bool:
        """
        SKU must be letters, digits or dashes, 3-32 characters.
        """
        return bool(SKU_PATTERN.match(sku))

    async def get_stock(self, sku: str) -> StockSummary:
        """
        Handle get stock request.

        Raises:
            HTTPException: 400 on invalid SKU, 404 on unknown SKU, 500 on internal error
        """
        if not self._validate_sku(sku):
            logger.warning(f"Invalid SKU format: {sku}")
            raise HTTPException(
                status_code=400,
                detail={
                    "error": "Invalid SKU format",
                    "detail": "SKU must contain letters, digits or dashes and be 3-32 characters long",
                    "received": sku
                }
            )

        try:
            summary = await self.service.get_stock_summary(sku)
        except Exception as e:
            logger.error(f"Error processing SKU {sku}: {str(e)}", exc_info=True)
            raise HTTPException(
                status_code=500,
                detail={
                    "error": "Internal server error",
                    "detail": str(e)
                }
            )

        if summary is None:
            raise HTTPException(
                status_code=404,
                detail={
                    "error": "Product not found",
                    "detail": f"No product with SKU {sku}"
                }
            )

        return summary
