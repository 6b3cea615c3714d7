"""Cart edits and the external messaging checkout link."""

from typing import List
from urllib.parse import quote

from storefront.exceptions import ValidationError
from storefront.models.view_types import CartItem
from storefront.services.derived_views import cart_totals, format_money

CHECKOUT_BASE_URL = "https://wa.me"
# Characters encodeURIComponent leaves untouched
URI_COMPONENT_SAFE = "-_.!~*'()"


def update_quantity(items: List[CartItem], item_id: str, quantity: int) -> List[CartItem]:
    """Return a new cart with one line's quantity changed; 0 removes the line."""
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative", field="quantity")
    if quantity == 0:
        return remove_item(items, item_id)
    return [item.model_copy(update={"quantity": quantity}) if item.id == item_id else item for item in items]


def remove_item(items: List[CartItem], item_id: str) -> List[CartItem]:
    return [item for item in items if item.id != item_id]


def build_checkout_message(items: List[CartItem]) -> str:
    totals = cart_totals(items)
    lines = "\n".join(
        f"{item.name} x{item.quantity} - {format_money(item.price * item.quantity)}" for item in items
    )
    return (
        f"Hi! I'd like to place an order:\n\n{lines}\n\n"
        f"Subtotal: {format_money(totals.subtotal)}\n"
        f"Tax: {format_money(totals.tax)}\n"
        f"Total: {format_money(totals.total)}"
    )


def build_checkout_link(items: List[CartItem], phone: str) -> str:
    """Deep link that opens the messaging app with the order pre-filled."""
    message = build_checkout_message(items)
    return f"{CHECKOUT_BASE_URL}/{phone}?text={quote(message, safe=URI_COMPONENT_SAFE)}"
