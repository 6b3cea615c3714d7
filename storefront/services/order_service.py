"""Order views over the sample order book, with an enforced status machine."""

from typing import Dict, FrozenSet, List, Optional

from storefront.exceptions import NotFoundError, ValidationError
from storefront.models.order_types import SAMPLE_ORDERS, OrderDoc
from storefront.models.util_types import ALL_STATUSES, OrderStatus
from storefront.services.derived_views import filter_orders
from storefront.util.logger import get_logger

logger = get_logger(__name__)

ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    OrderStatus.PENDING.value: frozenset({OrderStatus.CONFIRMED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.CONFIRMED.value: frozenset({OrderStatus.SHIPPED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.SHIPPED.value: frozenset({OrderStatus.DELIVERED.value}),
    OrderStatus.DELIVERED.value: frozenset(),
    OrderStatus.CANCELLED.value: frozenset(),
}

TOTAL_TOLERANCE = 0.005


class OrderService:
    """Read access to orders plus validated status changes.

    Orders live in memory only; nothing is persisted.
    """

    def __init__(self, orders: Optional[List[OrderDoc]] = None):
        self.orders = [order.model_copy(deep=True) for order in (orders if orders is not None else SAMPLE_ORDERS)]

    def list_orders(self, status: Optional[str] = ALL_STATUSES) -> List[OrderDoc]:
        return filter_orders(self.orders, status)

    def orders_for_customer(self, email: str) -> List[OrderDoc]:
        return [order for order in self.orders if order.customerEmail.lower() == (email or "").lower()]

    def get(self, order_id: str) -> OrderDoc:
        for order in self.orders:
            if order.id == order_id:
                return order
        raise NotFoundError("Order", order_id)

    def transition_status(self, order_id: str, new_status: str) -> OrderDoc:
        order = self.get(order_id)
        updated = transition_status(order, new_status)
        self.orders = [updated if o.id == order_id else o for o in self.orders]
        logger.info(f"Order {order_id} moved {order.status} -> {updated.status}")
        return updated

    def cancel_order(self, order_id: str, email: str) -> OrderDoc:
        """Customer cancellation: own orders only, and only while pending."""
        order = self.get(order_id)
        if order.customerEmail.lower() != (email or "").lower():
            raise NotFoundError("Order", order_id)
        if order.status != OrderStatus.PENDING.value:
            raise ValidationError("Only pending orders can be cancelled", field="status")
        return self.transition_status(order_id, OrderStatus.CANCELLED.value)


def transition_status(order: OrderDoc, new_status: str) -> OrderDoc:
    """Return a copy of ``order`` in ``new_status``.

    Raises:
        ValidationError: For unknown statuses or moves outside the allowed graph
    """
    if new_status not in ALLOWED_TRANSITIONS:
        raise ValidationError(f"Unknown order status '{new_status}'", field="status")
    if new_status not in ALLOWED_TRANSITIONS[order.status]:
        raise ValidationError(f"Cannot move order from {order.status} to {new_status}", field="status")
    return order.model_copy(update={"status": new_status})


def order_total_matches_items(order: OrderDoc) -> bool:
    expected = sum(item.price * item.quantity for item in order.items)
    return abs(expected - order.total) < TOTAL_TOLERANCE
