"""Session inspection callable function."""

from firebase_functions import https_fn, options
from storefront.exceptions import ProjectError
from storefront.models.function_types import SessionResponse
from storefront.services.access_gate import gate_for_page
from storefront.services.identity_resolver import landing_destination
from storefront.util.cors_response import cors_response_on_call
from storefront.util.db_auth_wrapper import request_session
from storefront.util.https_errors import to_https_error
from storefront.util.logger import get_logger

logger = get_logger(__name__)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def get_session_callable(req: https_fn.CallableRequest) -> SessionResponse:
    """Describe the caller's session and, optionally, the gate decision for a page.

    Args:
        req: Firebase callable request containing SessionRequest data

    Returns:
        SessionResponse; ``decision`` is None for public pages or when no
        page was given
    """
    options_response = cors_response_on_call(req.raw_request)
    if options_response:
        return options_response

    try:
        session = request_session(req)
        page = (req.data or {}).get("page")

        decision = None
        redirect_to = None
        gate = gate_for_page(page) if page else None
        if gate:
            outcome = gate.evaluate(session)
            decision = outcome.decision.value
            redirect_to = outcome.redirectTo

        return SessionResponse(
            success=True,
            uid=session.identity.uid if session.identity else None,
            email=session.identity.email if session.identity else None,
            role=session.role.value,
            loading=session.loading,
            decision=decision,
            redirectTo=redirect_to,
            landing=landing_destination(session),
        )

    except https_fn.HttpsError:
        raise
    except ProjectError as e:
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"Failed to resolve session: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "Failed to resolve session. Please try again later."
        )
