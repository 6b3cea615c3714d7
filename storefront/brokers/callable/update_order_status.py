"""Admin order status callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.function_types import OrderResponse
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
def update_order_status_callable(req: https_fn.CallableRequest) -> OrderResponse:
    """Move an order along the status graph.

    Orders are sample data, so the change lives only in the returned order.
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        data = req.data or {}
        order_id = data.get("orderId")
        new_status = data.get("status")
        if not order_id:
            raise ValidationError("orderId is required", field="orderId")
        if not new_status:
            raise ValidationError("status is required", field="status")

        order = OrderService().transition_status(order_id, new_status)

        return OrderResponse(success=True, order=order.model_dump())

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to update order status: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to update order status"
        )
