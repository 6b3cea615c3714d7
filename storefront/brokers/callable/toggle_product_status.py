"""Toggle product status callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.util_types import ProductStatus, Role
from storefront.services.catalog_service import CatalogStore
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)

STATUSES = {status.value for status in ProductStatus}


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def toggle_product_status_callable(req: https_fn.CallableRequest) -> dict:
    """Flip a product between active and inactive.

    Returns:
        ``{"success": True, "productId": ..., "status": <new status>}``
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        data = req.data or {}
        product_id = data.get("productId")
        current_status = data.get("currentStatus")
        if not product_id:
            raise ValidationError("Product ID is required", field="productId")
        if current_status not in STATUSES:
            raise ValidationError("currentStatus must be 'active' or 'inactive'", field="currentStatus")

        new_status = CatalogStore().toggle_status(product_id, current_status)

        return {"success": True, "productId": product_id, "status": new_status}

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to toggle product status: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to toggle product status"
        )
