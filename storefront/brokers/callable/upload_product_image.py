"""Product image upload callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.function_types import UploadImageResponse
from storefront.models.util_types import Role
from storefront.services.asset_uploader import AssetUploader
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
def upload_product_image_callable(req: https_fn.CallableRequest) -> UploadImageResponse:
    """Upload an image without touching any product and return its URL."""
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        require_role(req, Role.ADMIN)

        image = decode_image_payload((req.data or {}).get("image"))
        if not image:
            raise ValidationError("Image is required", field="image")

        filename, content, content_type = image
        image_url = AssetUploader().upload(filename, content, content_type)

        return UploadImageResponse(success=True, imageUrl=image_url)

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to upload image: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to upload image"
        )
