"""Logout callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError
from storefront.models.util_types import SuccessResponse
from storefront.services.identity_resolver import IdentityResolver
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import require_signed_in
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def logout_callable(req: https_fn.CallableRequest) -> dict:
    """Revoke the caller's refresh tokens. Completes only once signed out."""
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        resolver = IdentityResolver()
        session = require_signed_in(req, resolver)
        uid = session.identity.uid
        resolver.logout()

        logger.info(f"User {uid} signed out")
        return SuccessResponse(message="Signed out").model_dump()

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to sign out: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to sign out. Please try again."
        )
