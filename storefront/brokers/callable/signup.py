"""Signup callable function."""

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
def signup_callable(req: https_fn.CallableRequest) -> AuthResponse:
    """Create an account with a role and sign it in.

    Args:
        req: Firebase callable request containing SignupRequest data

    Returns:
        AuthResponse with the new uid, role and landing page
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        email = (req.data or {}).get("email")
        password = (req.data or {}).get("password")
        role = (req.data or {}).get("role")

        if not email or not password:
            raise ValidationError("Email and password are required", field="email" if not email else "password")

        resolver = IdentityResolver()
        credential = resolver.signup(email, password, role)
        session = resolver.current_session()

        return AuthResponse(
            success=True,
            uid=credential.uid,
            role=session.role.value,
            landing=landing_destination(session),
            idToken=credential.idToken,
            refreshToken=credential.refreshToken,
            message="Account created successfully",
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to sign up: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to create account. Please try again."
        )
