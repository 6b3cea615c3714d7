"""Utility type definitions."""

from enum import Enum
from typing import Optional, Dict, Any
from pydantic import BaseModel


class Role(str, Enum):
    """Access role stored in a user's Role Record."""
    ADMIN = "admin"
    CUSTOMER = "customer"
    NONE = "none"


class ProductStatus(str, Enum):
    """Product visibility status."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Category(str, Enum):
    """Fixed product category set."""
    FLOWERS = "Flowers"
    EDIBLES = "Edibles"
    CONCENTRATES = "Concentrates"
    VAPES = "Vapes"
    OILS = "Oils"
    TOPICALS = "Topicals"
    ACCESSORIES = "Accessories"
    SEEDS = "Seeds"


class OrderStatus(str, Enum):
    """Order lifecycle status."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Filter wildcards used by the shop and the orders views
ALL_CATEGORIES = "All"
ALL_STATUSES = "all"


class SuccessResponse(BaseModel):
    """Standard success response structure."""
    success: bool = True
    data: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
