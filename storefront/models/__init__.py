"""Models package initialization."""

from .firestore_types import (
    BaseDoc,
    ProductDoc,
    ProductInput,
    ProductUpdate,
    RoleRecordDoc,
    PLACEHOLDER_ASSETS,
    DEFAULT_PRODUCT_IMAGE,
)
from .order_types import OrderDoc, OrderItem, SAMPLE_ORDERS
from .view_types import CartItem, CartTotals, OrderStats, ProductStats
from .util_types import (
    Role,
    ProductStatus,
    Category,
    OrderStatus,
    ALL_CATEGORIES,
    ALL_STATUSES,
    SuccessResponse,
)

__all__ = [
    # Firestore types
    "BaseDoc",
    "ProductDoc",
    "ProductInput",
    "ProductUpdate",
    "RoleRecordDoc",
    "PLACEHOLDER_ASSETS",
    "DEFAULT_PRODUCT_IMAGE",
    # Orders
    "OrderDoc",
    "OrderItem",
    "SAMPLE_ORDERS",
    # View types
    "CartItem",
    "CartTotals",
    "OrderStats",
    "ProductStats",
    # Utility types
    "Role",
    "ProductStatus",
    "Category",
    "OrderStatus",
    "ALL_CATEGORIES",
    "ALL_STATUSES",
    "SuccessResponse",
]
