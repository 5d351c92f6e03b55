"""
Composition root: registers the stock display services and compiles the container.
"""

import logging
from stock_display.core.container import ServiceContainer
from stock_display.core.passes import LOW_INVENTORY_PROVIDER_ID, INVENTORY_STATUS_PROVIDER_ID
from stock_display.data.catalog import InventoryCatalog
from stock_display.inventory.providers import (
    ProductInventoryStatusProvider,
    ThresholdLowInventoryProvider,
)
from stock_display.layout.stock_provider import StockProvider
from stock_display.plugin import StockDisplayPlugin

logger = logging.getLogger(__name__)

CATALOG_ID = "stock_display.catalog"
STOCK_PROVIDER_ID = "stock_display.layout.data_provider.stock"


def register_services(container: ServiceContainer, catalog: InventoryCatalog) -> None:
    """
    Register the catalog, the inventory providers (private) and the stock facade.
    """
    container.register(CATALOG_ID, lambda c: catalog, public=True)
    container.register(
        INVENTORY_STATUS_PROVIDER_ID,
        lambda c: ProductInventoryStatusProvider()
    )
    container.register(
        LOW_INVENTORY_PROVIDER_ID,
        lambda c: ThresholdLowInventoryProvider(c.reference(CATALOG_ID))
    )
    container.register(
        STOCK_PROVIDER_ID,
        lambda c: StockProvider(
            inventory_levels=c.reference(CATALOG_ID),
            low_inventory_provider=c.reference(LOW_INVENTORY_PROVIDER_ID),
            inventory_status_provider=c.reference(INVENTORY_STATUS_PROVIDER_ID),
        ),
        public=True
    )


def build_container(catalog: InventoryCatalog) -> ServiceContainer:
    """
    Construct and compile the service container for a loaded catalog.
    """
    container = ServiceContainer()
    register_services(container, catalog)
    StockDisplayPlugin().build(container)
    container.compile()
    return container
