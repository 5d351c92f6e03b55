"""
Plugin entry point: hooks the stock display package into a service container.
"""

from stock_display.core.container import ServiceContainer
from stock_display.core.passes import MakeInventoryServicesPublicPass


class StockDisplayPlugin:
    """Registers the compiler passes this package needs."""

    name = "stock_display"

    def build(self, container: ServiceContainer) -> None:
        container.add_compiler_pass(MakeInventoryServicesPublicPass())
