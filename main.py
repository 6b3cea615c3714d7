"""
Firebase Functions entry point.
All functions must be exported from this file for deployment.
"""

import logging

import firebase_admin
from firebase_admin import initialize_app

from storefront.config.env_loader import ensure_emulator_hosts, get_storefront_config, load_environment

load_environment()

# Emulator hosts must be set before any Firebase client is created
ensure_emulator_hosts()

# The SDK picks up emulator hosts from the environment; no credentials needed there
if not firebase_admin._apps:
    bucket = get_storefront_config()["storage_bucket"]
    initialize_app(options={"storageBucket": bucket} if bucket else None)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Import callable functions
from storefront.brokers.callable.signup import signup_callable
from storefront.brokers.callable.login import login_callable
from storefront.brokers.callable.logout import logout_callable
from storefront.brokers.callable.get_session import get_session_callable
from storefront.brokers.callable.list_products import list_products_callable
from storefront.brokers.callable.add_product import add_product_callable
from storefront.brokers.callable.update_product import update_product_callable
from storefront.brokers.callable.delete_product import delete_product_callable
from storefront.brokers.callable.toggle_product_status import toggle_product_status_callable
from storefront.brokers.callable.upload_product_image import upload_product_image_callable
from storefront.brokers.callable.list_shop_products import list_shop_products_callable
from storefront.brokers.callable.list_orders import list_orders_callable
from storefront.brokers.callable.list_my_orders import list_my_orders_callable
from storefront.brokers.callable.update_order_status import update_order_status_callable
from storefront.brokers.callable.cancel_order import cancel_order_callable
from storefront.brokers.callable.checkout import checkout_callable

# Import HTTPS functions
from storefront.brokers.https.health_check import health_check

# Export all functions for Firebase deployment
__all__ = [
    # Auth
    'signup_callable',
    'login_callable',
    'logout_callable',
    'get_session_callable',

    # Admin catalog
    'list_products_callable',
    'add_product_callable',
    'update_product_callable',
    'delete_product_callable',
    'toggle_product_status_callable',
    'upload_product_image_callable',

    # Shop, orders and cart
    'list_shop_products_callable',
    'list_orders_callable',
    'list_my_orders_callable',
    'update_order_status_callable',
    'cancel_order_callable',
    'checkout_callable',

    # HTTPS functions
    'health_check',
]

logger.info("Firebase Functions initialized successfully")
