"""
JSON-backed product catalog with async I/O.

The file holds two lists, "products" and "inventory_levels". It is read once with
aiofiles (at application startup); lookups afterwards are synchronous and in-memory.
"""

from typing import Optional, Dict, List, Any, Union
from pathlib import Path
import json
import logging
import aiofiles
from pydantic import ValidationError
from stock_display.models import Product, InventoryLevel

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the catalog file cannot be read or parsed."""


class InventoryCatalog:
    """
    In-memory catalog of products and their inventory levels.
    Also serves as the inventory level repository for the stock facade.
    """

    def __init__(self, data_file: Union[str, Path, None] = None):
        self.data_file = Path(data_file) if data_file is not None else None
        self._products_by_sku: Dict[str, Product] = {}
        self._levels_by_product: Dict[int, InventoryLevel] = {}

    @classmethod
    def from_records(
        cls,
        products: List[Dict[str, Any]],
        inventory_levels: List[Dict[str, Any]]
    ) -> "InventoryCatalog":
        """
        Build a catalog directly from raw records (no file involved).
        """
        catalog = cls()
        catalog._populate({"products": products, "inventory_levels": inventory_levels})
        return catalog

    async def load(self) -> "InventoryCatalog":
        """
        Load product and inventory data from the JSON file asynchronously.

        Raises:
            CatalogError: If the file is missing, unreadable or malformed
        """
        if self.data_file is None:
            raise CatalogError("No catalog file configured")

        try:
            async with aiofiles.open(self.data_file, mode='r', encoding='utf-8') as f:
                content = await f.read()
            payload = json.loads(content)
        except OSError as e:
            raise CatalogError(f"Could not read catalog file {self.data_file}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file {self.data_file} is not valid JSON: {e}") from e

        self._populate(payload)
        logger.info(
            f"Catalog loaded from {self.data_file}: {len(self._products_by_sku)} products, "
            f"{len(self._levels_by_product)} inventory levels"
        )
        return self

    def _populate(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise CatalogError("Catalog payload must be a JSON object")

        try:
            products = [Product(**record) for record in payload.get("products", [])]
            levels = [InventoryLevel(**record) for record in payload.get("inventory_levels", [])]
        except (TypeError, ValidationError) as e:
            raise CatalogError(f"Invalid catalog record: {e}") from e

        self._products_by_sku = {}
        for product in products:
            if product.sku in self._products_by_sku:
                logger.warning(f"Duplicate product SKU {product.sku}, keeping the first")
                continue
            self._products_by_sku[product.sku] = product

        self._levels_by_product = {}
        for level in levels:
            if level.product_id in self._levels_by_product:
                logger.warning(f"Duplicate inventory level for product {level.product_id}, keeping the first")
                continue
            self._levels_by_product[level.product_id] = level

    def products(self) -> List[Product]:
        return list(self._products_by_sku.values())

    def find_product_by_sku(self, sku: str) -> Optional[Product]:
        return self._products_by_sku.get(sku)

    def find_one_by_product(self, product: Product) -> Optional[InventoryLevel]:
        """Inventory level for the product, or None if none is recorded."""
        return self._levels_by_product.get(product.id)
