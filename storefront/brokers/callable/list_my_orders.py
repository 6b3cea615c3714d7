"""Customer order history callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError
from storefront.models.function_types import ListOrdersResponse
from storefront.models.util_types import Role
from storefront.services.order_service import OrderService
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def list_my_orders_callable(req: https_fn.CallableRequest) -> ListOrdersResponse:
    """Orders placed with the caller's email address."""
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        session = require_role(req, Role.CUSTOMER)
        orders = OrderService().orders_for_customer(session.identity.email)

        return ListOrdersResponse(
            success=True,
            orders=[order.model_dump() for order in orders],
            stats=None,
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to list customer orders: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to fetch orders"
        )
