"""Session resolution for callable requests."""

from typing import Optional

from firebase_functions import https_fn

from storefront.apis.Db import Db
from storefront.models.util_types import Role
from storefront.services.access_gate import AccessGate
from storefront.services.identity_resolver import Identity, IdentityResolver, SessionContext
from storefront.exceptions import UnauthenticatedError
from storefront.util.logger import get_logger

logger = get_logger(__name__)


def request_session(req: https_fn.CallableRequest, resolver: Optional[IdentityResolver] = None) -> SessionContext:
    """Resolve the caller of a callable to a ready SessionContext.

    The platform has already verified ``req.auth``. In development a
    ``User-Id`` header may stand in for it (test identification); the role is
    still read from the Role Record either way.
    """
    resolver = resolver or IdentityResolver()

    if Db.is_development():
        raw_request = getattr(req, "raw_request", None)
        headers = raw_request.headers if raw_request is not None else None
        user_id = headers.get("User-Id") if headers else None
        if user_id:
            return resolver.handle_session_change(Identity(uid=user_id, email=headers.get("User-Email")))

    if not req.auth:
        return resolver.handle_session_change(None)

    claims = dict(req.auth.token or {})
    return resolver.handle_session_change(Identity(uid=req.auth.uid, email=claims.get("email")), claims)


def require_role(req: https_fn.CallableRequest, role: Role, resolver: Optional[IdentityResolver] = None) -> SessionContext:
    """Resolve the caller and apply the Access Gate for ``role``.

    Raises:
        UnauthenticatedError: No signed-in caller
        AccessDeniedError: Caller holds a different role
    """
    session = request_session(req, resolver)
    return AccessGate(role).enforce(session)


def require_signed_in(req: https_fn.CallableRequest, resolver: Optional[IdentityResolver] = None) -> SessionContext:
    session = request_session(req, resolver)
    if session.identity is None:
        logger.warning("Unauthenticated request")
        raise UnauthenticatedError()
    return session
