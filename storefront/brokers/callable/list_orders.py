"""Admin order listing callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError
from storefront.models.function_types import ListOrdersResponse
from storefront.models.util_types import ALL_STATUSES, Role
from storefront.services.derived_views import order_stats
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
def list_orders_callable(req: https_fn.CallableRequest) -> ListOrdersResponse:
    """Sample orders filtered by status, with stats over all orders."""
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        service = OrderService()
        status = (req.data or {}).get("status") or ALL_STATUSES

        return ListOrdersResponse(
            success=True,
            orders=[order.model_dump() for order in service.list_orders(status)],
            stats=order_stats(service.list_orders()).model_dump(),
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to list orders: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to fetch orders"
        )
