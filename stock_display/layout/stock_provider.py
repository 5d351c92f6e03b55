"""
Stock data provider for the presentation layer.

Exposes quantity, in-stock flag, display message and low-inventory flag for a
product-like value. All inventory computation is delegated to the injected
collaborators; this class only unwraps the product and formats the result.
"""

from typing import Any, Optional
from collections.abc import Mapping
import logging
from stock_display.models import Product
from stock_display.inventory.providers import (
    InventoryLevelRepository,
    InventoryStatusProvider,
    LowInventoryProvider,
)

logger = logging.getLogger(__name__)

OUT_OF_STOCK_MARKER = "out_of_stock"
OUT_OF_STOCK_MESSAGE = "Out of stock"
AVAILABLE_STOCK_MESSAGE = "Available stock: {quantity} units"


class StockProvider:
    """
    Read-only stock facade.

    Accepts a Product, an object exposing get_entity() or entity(), or a mapping
    with an "entity" key. Any input that does not unwrap to a Product yields the
    negative result (None / False / "Out of stock").
    """

    def __init__(
        self,
        inventory_levels: InventoryLevelRepository,
        low_inventory_provider: LowInventoryProvider,
        inventory_status_provider: InventoryStatusProvider
    ):
        self.inventory_levels = inventory_levels
        self.low_inventory_provider = low_inventory_provider
        self.inventory_status_provider = inventory_status_provider

    def resolve_underlying_product(self, data: Any) -> Optional[Product]:
        """
        Unwrap a product-like value.

        Checked in order: the value itself, get_entity(), entity(), mapping["entity"].

        Returns:
            The underlying Product, or None
        """
        if isinstance(data, Product):
            return data

        if callable(getattr(data, "get_entity", None)):
            entity = data.get_entity()
        elif callable(getattr(data, "entity", None)):
            entity = data.entity()
        elif isinstance(data, Mapping) and data.get("entity") is not None:
            entity = data["entity"]
        else:
            logger.debug(f"Cannot resolve a product from {type(data).__name__}")
            return None

        if not isinstance(entity, Product):
            logger.debug(f"Unwrapped value is {type(entity).__name__}, not a Product")
            return None
        return entity

    def _is_out_of_stock(self, product: Product) -> bool:
        status_code = self.inventory_status_provider.get_code(product)
        return bool(status_code) and OUT_OF_STOCK_MARKER in status_code

    def get_available_stock(self, data: Any) -> Optional[int]:
        """
        Available quantity for a product.

        Returns:
            Quantity on hand as int, or None if the product cannot be resolved,
            is flagged out of stock, or has no inventory level
        """
        product = self.resolve_underlying_product(data)
        if product is None:
            return None

        if self._is_out_of_stock(product):
            return None

        level = self.inventory_levels.find_one_by_product(product)
        if level is None:
            return None

        return int(level.quantity)

    def is_in_stock(self, data: Any) -> bool:
        product = self.resolve_underlying_product(data)
        if product is None or self._is_out_of_stock(product):
            return False

        stock = self.get_available_stock(data)
        return stock is not None and stock > 0

    def get_stock_message(self, data: Any) -> str:
        """
        Human readable stock message, e.g. "Available stock: 5 units".
        """
        product = self.resolve_underlying_product(data)
        if product is None or self._is_out_of_stock(product):
            return OUT_OF_STOCK_MESSAGE

        stock = self.get_available_stock(data)
        if stock is None or stock <= 0:
            return OUT_OF_STOCK_MESSAGE

        return AVAILABLE_STOCK_MESSAGE.format(quantity=stock)

    def is_low_inventory(self, data: Any) -> bool:
        product = self.resolve_underlying_product(data)
        if product is None:
            return False

        return self.low_inventory_provider.is_low_inventory_product(product)
