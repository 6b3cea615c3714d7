"""Delete product callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.function_types import ProductResponse
from storefront.models.util_types import Role
from storefront.services.catalog_service import CatalogStore
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def delete_product_callable(req: https_fn.CallableRequest) -> ProductResponse:
    """Delete a product and, best effort, its uploaded image."""
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        data = req.data or {}
        product_id = data.get("productId")
        if not product_id:
            raise ValidationError("Product ID is required", field="productId")

        CatalogStore().delete(product_id, data.get("imageUrl"))

        return ProductResponse(
            success=True,
            productId=product_id,
            message="Product deleted successfully"
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to delete product: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to delete product"
        )
