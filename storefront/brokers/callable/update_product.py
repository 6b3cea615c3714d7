"""Update product callable function."""

from datetime import datetime

from firebase_functions import https_fn, options
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
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

_timestamp = TypeAdapter(datetime)


def parse_expected_updated_at(value):
    if not value:
        return None
    try:
        return _timestamp.validate_python(value)
    except PydanticValidationError as e:
        raise ValidationError("expectedUpdatedAt must be an ISO 8601 timestamp", field="expectedUpdatedAt") from e


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def update_product_callable(req: https_fn.CallableRequest) -> ProductResponse:
    """Merge field changes into a product.

    An attached image is uploaded first and replaces ``imageUrl``. When
    ``expectedUpdatedAt`` is sent the write only succeeds if nobody else
    changed the product in between (ABORTED otherwise).
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        data = req.data or {}
        product_id = data.get("productId")
        updates = data.get("updates") or {}
        if not product_id:
            raise ValidationError("Product ID is required", field="productId")
        if not isinstance(updates, dict):
            raise ValidationError("Updates must be an object", field="updates")
        expected_updated_at = parse_expected_updated_at(data.get("expectedUpdatedAt"))

        uploader = AssetUploader()
        image = decode_image_payload(data.get("image"))
        if image:
            filename, content, content_type = image
            updates = {**updates, "imageUrl": uploader.upload(filename, content, content_type)}

        CatalogStore(uploader=uploader).update(product_id, updates, expected_updated_at)

        return ProductResponse(
            success=True,
            productId=product_id,
            message="Product updated successfully"
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to update product: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to update product"
        )
