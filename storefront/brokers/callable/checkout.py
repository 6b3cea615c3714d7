"""Checkout callable function."""

from typing import List

from firebase_functions import https_fn, options
from pydantic import ValidationError as PydanticValidationError
from storefront.config.env_loader import get_storefront_config
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.function_types import CheckoutResponse
from storefront.models.util_types import Role
from storefront.models.view_types import CartItem
from storefront.services.checkout import build_checkout_link, build_checkout_message
from storefront.services.derived_views import cart_totals
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


def parse_cart(raw_items) -> List[CartItem]:
    if not isinstance(raw_items, list) or not raw_items:
        raise ValidationError("Cart is empty", field="items")
    try:
        items = [CartItem(**item) for item in raw_items]
    except (PydanticValidationError, TypeError) as e:
        raise ValidationError("Cart items must have id, name, price and quantity", field="items") from e
    if any(item.quantity < 1 for item in items):
        raise ValidationError("Cart quantities must be at least 1", field="quantity")
    return items


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def checkout_callable(req: https_fn.CallableRequest) -> CheckoutResponse:
    """Price the cart and build the messaging deep link that places the order.

    Nothing is persisted; the order is completed in the messaging app.
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.CUSTOMER)

        items = parse_cart((req.data or {}).get("items"))
        totals = cart_totals(items)
        phone = get_storefront_config()["checkout_phone"]

        return CheckoutResponse(
            success=True,
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            message=build_checkout_message(items),
            checkoutUrl=build_checkout_link(items, phone),
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to build checkout: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to start checkout. Please try again."
        )
