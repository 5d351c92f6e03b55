"""
Compiler passes applied while the service container is assembled.
"""

import logging

from stock_display.core.container import ServiceContainer

logger = logging.getLogger(__name__)

LOW_INVENTORY_PROVIDER_ID = "inventory.inventory.low_inventory_provider"
INVENTORY_STATUS_PROVIDER_ID = "inventory.provider.inventory_status"


class MakeInventoryServicesPublicPass:
    """
    Marks the low-inventory and inventory-status providers as public so the
    presentation layer can resolve them from the container.
    Ids without a definition are skipped.
    """

    service_ids = (LOW_INVENTORY_PROVIDER_ID, INVENTORY_STATUS_PROVIDER_ID)

    def process(self, container: ServiceContainer) -> None:
        for service_id in self.service_ids:
            if container.has_definition(service_id):
                container.get_definition(service_id).set_public(True)
                logger.debug(f"Service '{service_id}' marked public")
            else:
                logger.debug(f"Service '{service_id}' not defined, skipping")
