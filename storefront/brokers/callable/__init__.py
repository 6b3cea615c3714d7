"""Callable brokers package."""

from .signup import signup_callable
from .login import login_callable
from .logout import logout_callable
from .get_session import get_session_callable
from .list_products import list_products_callable
from .add_product import add_product_callable
from .update_product import update_product_callable
from .delete_product import delete_product_callable
from .toggle_product_status import toggle_product_status_callable
from .upload_product_image import upload_product_image_callable
from .list_shop_products import list_shop_products_callable
from .list_orders import list_orders_callable
from .list_my_orders import list_my_orders_callable
from .update_order_status import update_order_status_callable
from .cancel_order import cancel_order_callable
from .checkout import checkout_callable

__all__ = [
    "signup_callable",
    "login_callable",
    "logout_callable",
    "get_session_callable",
    "list_products_callable",
    "add_product_callable",
    "update_product_callable",
    "delete_product_callable",
    "toggle_product_status_callable",
    "upload_product_image_callable",
    "list_shop_products_callable",
    "list_orders_callable",
    "list_my_orders_callable",
    "update_order_status_callable",
    "cancel_order_callable",
    "checkout_callable",
]
