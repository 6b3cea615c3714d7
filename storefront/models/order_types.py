"""Order type definitions and the sample order book."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from storefront.models.util_types import OrderStatus


class OrderItem(BaseModel):
    """A single order line."""

    name: str
    quantity: int
    price: float


class OrderDoc(BaseModel):
    """Order shape shared by the admin and customer order views.

    ``total`` is intended to equal the sum of item lines; sample data does
    not enforce it.
    """

    model_config = ConfigDict(use_enum_values=True)

    id: str
    customerEmail: str
    customerName: str
    date: str
    status: OrderStatus
    total: float
    items: List[OrderItem] = Field(default_factory=list)


SAMPLE_ORDERS: List[OrderDoc] = [
    OrderDoc(
        id="ORD-001",
        customerEmail="customer1@example.com",
        customerName="John Doe",
        date="2025-06-20",
        status=OrderStatus.DELIVERED,
        total=79.98,
        items=[
            OrderItem(name="Premium CBD Oil", quantity=1, price=49.99),
            OrderItem(name="Cannabis Gummies", quantity=1, price=29.99),
        ],
    ),
    OrderDoc(
        id="ORD-002",
        customerEmail="customer2@example.com",
        customerName="Jane Smith",
        date="2025-06-23",
        status=OrderStatus.SHIPPED,
        total=39.99,
        items=[OrderItem(name="THC Vape Cartridge", quantity=1, price=39.99)],
    ),
    OrderDoc(
        id="ORD-003",
        customerEmail="customer3@example.com",
        customerName="Mike Johnson",
        date="2025-06-25",
        status=OrderStatus.PENDING,
        total=35.00,
        items=[OrderItem(name="Hybrid Flower", quantity=1, price=35.00)],
    ),
]
