"""Types for client-local state and derived view results."""

from typing import Dict
from pydantic import BaseModel

from storefront.models.firestore_types import DEFAULT_PRODUCT_IMAGE


class CartItem(BaseModel):
    """Cart line held in page-local state; never persisted."""

    id: str
    name: str
    price: float
    quantity: int
    imageUrl: str = DEFAULT_PRODUCT_IMAGE


class ProductStats(BaseModel):
    total: int
    activeCount: int
    inactiveCount: int
    lowStock: int
    inventoryValue: float


class OrderStats(BaseModel):
    total: int
    byStatus: Dict[str, int]
    revenue: float


class CartTotals(BaseModel):
    subtotal: float
    tax: float
    total: float
