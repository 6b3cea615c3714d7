"""Login callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError, ValidationError
from storefront.models.function_types import AuthResponse
from storefront.services.identity_resolver import IdentityResolver, landing_destination
from storefront.util.cors_response import cors_response_on_call
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def login_callable(req: https_fn.CallableRequest) -> AuthResponse:
    """Sign in with email and password.

    Returns:
        AuthResponse with tokens for the client SDK, the resolved role and
        the landing page for that role
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        email = (req.data or {}).get("email")
        password = (req.data or {}).get("password")
        if not email or not password:
            raise ValidationError("Email and password are required", field="email" if not email else "password")

        resolver = IdentityResolver()
        credential = resolver.login(email, password)
        session = resolver.current_session()
        logger.info(f"User {credential.uid} signed in as {session.role.value}")

        return AuthResponse(
            success=True,
            uid=credential.uid,
            role=session.role.value,
            landing=landing_destination(session),
            idToken=credential.idToken,
            refreshToken=credential.refreshToken,
            message=None,
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to sign in: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to sign in. Please try again."
        )
