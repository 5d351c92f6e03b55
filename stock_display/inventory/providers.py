"""
Inventory collaborators used by the stock facade.

The protocols describe what the facade needs from the inventory subsystem;
the classes below are the implementations wired by default.
"""

from typing import Optional, Protocol, runtime_checkable
import logging
from stock_display.models import Product, InventoryLevel

logger = logging.getLogger(__name__)


@runtime_checkable
class InventoryStatusProvider(Protocol):
    def get_code(self, product: Product) -> Optional[str]:
        ...


@runtime_checkable
class LowInventoryProvider(Protocol):
    def is_low_inventory_product(self, product: Product) -> bool:
        ...


@runtime_checkable
class InventoryLevelRepository(Protocol):
    def find_one_by_product(self, product: Product) -> Optional[InventoryLevel]:
        ...


class ProductInventoryStatusProvider:
    """
    Reads the inventory status code stored on the product.
    """

    def get_code(self, product: Product) -> Optional[str]:
        return product.inventory_status


class ThresholdLowInventoryProvider:
    """
    Flags a product as low inventory when highlighting is enabled for it and
    its quantity on hand is at or below its low-inventory threshold.
    """

    def __init__(self, inventory_levels: InventoryLevelRepository):
        self.inventory_levels = inventory_levels

    def is_low_inventory_product(self, product: Product) -> bool:
        if not product.highlight_low_inventory:
            return False

        level = self.inventory_levels.find_one_by_product(product)
        if level is None:
            logger.debug(f"No inventory level for product {product.id}, not flagging low inventory")
            return False

        return level.quantity <= product.low_inventory_threshold
