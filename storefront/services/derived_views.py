"""Pure reductions over in-memory product, order and cart lists.

Recomputed on every call; nothing here caches or talks to Firestore.
"""

from typing import Iterable, List, Optional

from storefront.models.firestore_types import ProductDoc
from storefront.models.order_types import OrderDoc
from storefront.models.util_types import ALL_CATEGORIES, ALL_STATUSES, OrderStatus, ProductStatus
from storefront.models.view_types import CartItem, CartTotals, OrderStats, ProductStats

LOW_STOCK_THRESHOLD = 5
TAX_RATE = 0.10


def product_stats(products: Iterable[ProductDoc]) -> ProductStats:
    products = list(products)
    active = sum(1 for p in products if p.status == ProductStatus.ACTIVE.value)
    return ProductStats(
        total=len(products),
        activeCount=active,
        inactiveCount=len(products) - active,
        lowStock=sum(1 for p in products if p.stock <= LOW_STOCK_THRESHOLD),
        inventoryValue=sum(p.price * p.stock for p in products),
    )


def matches_search(product: ProductDoc, search_term: str) -> bool:
    term = search_term.lower()
    return term in product.name.lower() or term in (product.description or "").lower()


def filter_products(
    products: Iterable[ProductDoc],
    category: Optional[str] = ALL_CATEGORIES,
    search_term: Optional[str] = "",
) -> List[ProductDoc]:
    """Exact category match (skipped for "All") and case-insensitive name/description search."""
    return [
        p for p in products
        if (not category or category == ALL_CATEGORIES or p.category == category)
        and (not search_term or matches_search(p, search_term))
    ]


def filter_orders(orders: Iterable[OrderDoc], status: Optional[str] = ALL_STATUSES) -> List[OrderDoc]:
    return [o for o in orders if not status or status == ALL_STATUSES or o.status == status]


def order_stats(orders: Iterable[OrderDoc]) -> OrderStats:
    orders = list(orders)
    by_status = {status.value: 0 for status in OrderStatus}
    for order in orders:
        by_status[order.status] = by_status.get(order.status, 0) + 1
    revenue = sum(o.total for o in orders if o.status == OrderStatus.DELIVERED.value)
    return OrderStats(total=len(orders), byStatus=by_status, revenue=revenue)


def cart_totals(items: Iterable[CartItem]) -> CartTotals:
    subtotal = sum(item.price * item.quantity for item in items)
    tax = subtotal * TAX_RATE
    return CartTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


def format_money(amount: float) -> str:
    return f"${amount:.2f}"
