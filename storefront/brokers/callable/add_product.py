"""Add product callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.function_types import ProductResponse
from storefront.models.util_types import Role
from storefront.services.asset_uploader import AssetUploader
from storefront.services.catalog_service import CatalogStore
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_role
from storefront.util.https_errors import to_https_error
from storefront.util.image_payload import decode_image_payload
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def add_product_callable(req: https_fn.CallableRequest) -> ProductResponse:
    """Create a product, uploading its image first when one is attached.

    Args:
        req: Firebase callable request containing AddProductRequest data

    Returns:
        ProductResponse with the new product id
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        session = require_role(req, Role.ADMIN)

        data = req.data or {}
        product = data.get("product")
        if not isinstance(product, dict):
            raise ValidationError("Product data is required", field="product")

        uploader = AssetUploader()
        image = decode_image_payload(data.get("image"))
        if image:
            filename, content, content_type = image
            product = {**product, "imageUrl": uploader.upload(filename, content, content_type)}

        product_id = CatalogStore(uploader=uploader).add(product)
        logger.info(f"Product {product_id} added by {session.identity.uid}")

        return ProductResponse(
            success=True,
            productId=product_id,
            message="Product added successfully"
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to add product: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to add product"
        )
