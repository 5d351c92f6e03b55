"""
Data models for the stock display service.
All models use Pydantic for validation and static typing.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class Product(BaseModel):
    """
    Catalog product as seen by the stock display layer.
    inventory_status holds the status code computed by the inventory subsystem,
    e.g. "prod_inventory_status.in_stock" or "prod_inventory_status.out_of_stock".
    """
    id: int
    sku: str
    name: str
    inventory_status: Optional[str] = None
    highlight_low_inventory: bool = False
    low_inventory_threshold: float = 0

    @field_validator('sku')
    @classmethod
    def validate_sku(cls, v: str) -> str:
        """SKU must not be blank."""
        if not v.strip():
            raise ValueError('SKU must not be empty')
        return v.strip()


class InventoryLevel(BaseModel):
    """
    Quantity on hand for a single product (1:1 with Product).
    """
    product_id: int
    quantity: float = 0


class ProductContext:
    """
    Wrapper handed to templates: exposes the underlying product through get_entity().
    """

    def __init__(self, entity: Any):
        self._entity = entity

    def get_entity(self) -> Any:
        return self._entity


class StockSummary(BaseModel):
    """
    API response model for GET /products/{sku}/stock.
    """
    sku: str
    product_id: int
    quantity: Optional[int] = None
    in_stock: bool
    message: str
    low_inventory: bool
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """
    error: str
    detail: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
