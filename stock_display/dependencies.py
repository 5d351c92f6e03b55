"""
FastAPI dependencies resolving services from the compiled container.
"""

from typing import Optional
from fastapi import Depends, HTTPException
from stock_display.core.container import ServiceContainer
from stock_display.core.wiring import CATALOG_ID, STOCK_PROVIDER_ID
from stock_display.service import StockService
from stock_display.controllers.stock_controller import StockController

_container: Optional[ServiceContainer] = None


def set_container(container: Optional[ServiceContainer]) -> None:
    global _container
    _container = container


def get_container() -> ServiceContainer:
    if _container is None:
        raise HTTPException(
            status_code=503,
            detail={"error": "Service unavailable", "detail": "Catalog not loaded"}
        )
    return _container


def get_stock_service() -> StockService:
    container = get_container()
    return StockService(
        stock_provider=container.get(STOCK_PROVIDER_ID),
        catalog=container.get(CATALOG_ID),
    )


def get_stock_controller(service: StockService = Depends(get_stock_service)) -> StockController:
    return StockController(service)
