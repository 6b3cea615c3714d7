"""Firestore document type definitions using Pydantic."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from storefront.models.util_types import Category, ProductStatus, Role

# Bundled default images; never deleted from storage
PLACEHOLDER_ASSETS = ("next.svg", "vercel.svg")
DEFAULT_PRODUCT_IMAGE = "/next.svg"


class BaseDoc(BaseModel):
    """Base document type for mutable Firestore documents."""

    model_config = ConfigDict(use_enum_values=True)

    createdAt: datetime
    updatedAt: datetime


class ProductDoc(BaseDoc):
    """Product document stored in the ``products`` collection.

    Price and stock signs are not checked here; callers enforce them.
    """

    id: str
    name: str
    description: str = ""
    price: float
    category: str
    stock: int
    imageUrl: str = DEFAULT_PRODUCT_IMAGE
    status: ProductStatus = ProductStatus.ACTIVE


class ProductInput(BaseModel):
    """Fields accepted when creating a product."""

    model_config = ConfigDict(use_enum_values=True)

    name: str
    description: str = ""
    price: float
    category: Category
    stock: int
    imageUrl: str = DEFAULT_PRODUCT_IMAGE
    status: ProductStatus = ProductStatus.ACTIVE


class ProductUpdate(BaseModel):
    """Partial product fields; unset fields are left untouched."""

    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[Category] = None
    stock: Optional[int] = None
    imageUrl: Optional[str] = None
    status: Optional[ProductStatus] = None


class RoleRecordDoc(BaseModel):
    """Role Record stored in ``users/{uid}``. Written once at signup."""

    model_config = ConfigDict(use_enum_values=True)

    email: Optional[str] = None
    role: Role
    createdAt: datetime
