"""Tests for the JSON catalog and the default inventory providers."""

import asyncio
import json

import pytest

from stock_display.core.config import DEFAULT_CATALOG_PATH
from stock_display.data.catalog import CatalogError, InventoryCatalog
from stock_display.inventory.providers import (
    InventoryLevelRepository,
    LowInventoryProvider,
    ProductInventoryStatusProvider,
    ThresholdLowInventoryProvider,
)
from stock_display.models import Product


def write_catalog(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_catalog_from_file(tmp_path):
    path = write_catalog(tmp_path / "catalog.json", {
        "products": [
            {"id": 1, "sku": "SKU001", "name": "Widget"},
            {"id": 2, "sku": "SKU002", "name": "Gadget", "inventory_status": "x.out_of_stock"},
        ],
        "inventory_levels": [{"product_id": 1, "quantity": 12}],
    })

    catalog = asyncio.run(InventoryCatalog(path).load())

    assert [p.sku for p in catalog.products()] == ["SKU001", "SKU002"]
    widget = catalog.find_product_by_sku("SKU001")
    assert catalog.find_one_by_product(widget).quantity == 12
    assert catalog.find_one_by_product(catalog.find_product_by_sku("SKU002")) is None
    assert catalog.find_product_by_sku("NOPE") is None


def test_bundled_catalog_loads():
    catalog = asyncio.run(InventoryCatalog(DEFAULT_CATALOG_PATH).load())

    assert catalog.find_product_by_sku("SKU001") is not None


def test_duplicate_inventory_level_keeps_first():
    catalog = InventoryCatalog.from_records(
        [{"id": 1, "sku": "SKU001", "name": "Widget"}],
        [{"product_id": 1, "quantity": 3}, {"product_id": 1, "quantity": 9}],
    )

    assert catalog.find_one_by_product(catalog.find_product_by_sku("SKU001")).quantity == 3


def test_duplicate_sku_keeps_first(caplog):
    catalog = InventoryCatalog.from_records(
        [{"id": 1, "sku": "SKU001", "name": "Widget"}, {"id": 2, "sku": "SKU001", "name": "Clone"}],
        [],
    )

    assert catalog.find_product_by_sku("SKU001").id == 1
    assert len(catalog.products()) == 1
    assert "Duplicate product SKU SKU001" in caplog.text


def test_missing_file_raises_catalog_error(tmp_path):
    with pytest.raises(CatalogError):
        asyncio.run(InventoryCatalog(tmp_path / "missing.json").load())


def test_invalid_json_raises_catalog_error(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogError):
        asyncio.run(InventoryCatalog(path).load())


def test_invalid_record_raises_catalog_error(tmp_path):
    path = write_catalog(tmp_path / "catalog.json", {"products": [{"id": "abc", "sku": "SKU001"}]})

    with pytest.raises(CatalogError):
        asyncio.run(InventoryCatalog(path).load())


def test_non_object_payload_raises_catalog_error():
    with pytest.raises(CatalogError):
        InventoryCatalog()._populate([1, 2, 3])


def test_load_without_file_raises_catalog_error():
    with pytest.raises(CatalogError):
        asyncio.run(InventoryCatalog().load())


def test_status_provider_reads_product_status():
    provider = ProductInventoryStatusProvider()
    product = Product(id=1, sku="SKU001", name="Widget", inventory_status="prod_inventory_status.in_stock")

    assert provider.get_code(product) == "prod_inventory_status.in_stock"
    assert provider.get_code(Product(id=2, sku="SKU002", name="Gadget")) is None


def make_catalog(quantity):
    levels = [] if quantity is None else [{"product_id": 1, "quantity": quantity}]
    return InventoryCatalog.from_records(
        [{
            "id": 1,
            "sku": "SKU001",
            "name": "Widget",
            "highlight_low_inventory": True,
            "low_inventory_threshold": 5,
        }],
        levels,
    )


@pytest.mark.parametrize("quantity, expected", [(3, True), (5, True), (6, False), (None, False)])
def test_threshold_low_inventory(quantity, expected):
    catalog = make_catalog(quantity)
    provider = ThresholdLowInventoryProvider(catalog)

    assert provider.is_low_inventory_product(catalog.find_product_by_sku("SKU001")) is expected


def test_low_inventory_requires_highlight_flag():
    catalog = InventoryCatalog.from_records(
        [{"id": 1, "sku": "SKU001", "name": "Widget", "low_inventory_threshold": 10}],
        [{"product_id": 1, "quantity": 1}],
    )
    provider = ThresholdLowInventoryProvider(catalog)

    assert provider.is_low_inventory_product(catalog.find_product_by_sku("SKU001")) is False


def test_default_implementations_satisfy_protocols():
    catalog = make_catalog(1)

    assert isinstance(catalog, InventoryLevelRepository)
    assert isinstance(ThresholdLowInventoryProvider(catalog), LowInventoryProvider)
