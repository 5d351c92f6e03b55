"""
Stock routes.
Handles product stock endpoints.
"""

from fastapi import APIRouter, Depends, Path
from stock_display.models import StockSummary, ErrorResponse
from stock_display.controllers.stock_controller import StockController
from stock_display.dependencies import get_stock_controller
from stock_display.views.stock_view import StockView

router = APIRouter(
    prefix="/products",
    tags=["stock"]
)


async def get_stock(
    sku: str = Path(
        ...,
        description="Product SKU (letters, digits or dashes, 3-32 characters)",
        examples=["SKU001"]
    ),
    controller: StockController = Depends(get_stock_controller)
) -> StockSummary:
    """
    Get quantity, availability message and low-inventory flag for a product.
    """
    summary = await controller.get_stock(sku)
    return StockView.render(summary)

router.add_api_route(
    "/{sku}/stock",
    get_stock,
    methods=["GET"],
    response_model=StockSummary,
    responses={
        200: {
            "description": "Stock data for the product",
            "model": StockSummary
        },
        400: {
            "description": "Invalid SKU format",
            "model": ErrorResponse
        },
        404: {
            "description": "Unknown SKU",
            "model": ErrorResponse
        },
        500: {
            "description": "Internal server error",
            "model": ErrorResponse
        }
    },
    summary="Get stock for a product"
)
