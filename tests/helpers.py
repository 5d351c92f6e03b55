"""Shared fakes and builders for the stock display tests."""

from typing import Any, Dict, Optional

from stock_display.core.wiring import CATALOG_ID, STOCK_PROVIDER_ID, build_container
from stock_display.data.catalog import InventoryCatalog
from stock_display.service import StockService


class FakeCache:
    def __init__(self) -> None:
        self.store: Dict[str, Any] = {}

    async def get_summary(self, sku: str) -> Optional[Dict[str, Any]]:
        return self.store.get(f"stock:{sku}")

    async def store_summary(self, sku: str, payload: Dict[str, Any]) -> bool:
        self.store[f"stock:{sku}"] = payload
        return True


def make_catalog() -> InventoryCatalog:
    return InventoryCatalog.from_records(
        [
            {"id": 1, "sku": "SKU001", "name": "Shoe", "inventory_status": "prod_inventory_status.in_stock",
             "highlight_low_inventory": True, "low_inventory_threshold": 10},
            {"id": 2, "sku": "SKU002", "name": "Vest", "inventory_status": "prod_inventory_status.in_stock",
             "highlight_low_inventory": True, "low_inventory_threshold": 5},
            {"id": 3, "sku": "SKU003", "name": "Lamp", "inventory_status": "prod_inventory_status.out_of_stock"},
            {"id": 4, "sku": "SKU004", "name": "Socks", "inventory_status": "prod_inventory_status.in_stock"},
        ],
        [
            {"product_id": 1, "quantity": 42},
            {"product_id": 2, "quantity": 3},
            {"product_id": 3, "quantity": 17},
            {"product_id": 4, "quantity": 0},
        ],
    )


def make_service(cache: Optional[FakeCache] = None) -> StockService:
    container = build_container(make_catalog())
    return StockService(
        stock_provider=container.get(STOCK_PROVIDER_ID),
        catalog=container.get(CATALOG_ID),
        cache=cache if cache is not None else FakeCache(),
    )
