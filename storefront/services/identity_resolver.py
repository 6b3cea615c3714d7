"""Identity Resolver: session state, role resolution and account actions."""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from storefront.apis.Auth import Auth, AuthProviderError, Credential
from storefront.apis.Db import Db
from storefront.documents.users.RoleRecord import RoleRecord, parse_role
from storefront.exceptions import AuthenticationError, ValidationError
from storefront.models.util_types import Role
from storefront.util.logger import get_logger

logger = get_logger(__name__)

SIGNUP_FALLBACK_MESSAGE = "Failed to create account. Please try again."
LOGIN_FALLBACK_MESSAGE = "Failed to sign in. Please try again."

# One message table for every account action
AUTH_ERROR_MESSAGES = {
    "email-already-in-use": "An account with this email already exists.",
    "weak-password": "Password should be at least 6 characters.",
    "missing-password": "Password should be at least 6 characters.",
    "invalid-email": "Please enter a valid email address.",
    "configuration-not-found": "Firebase configuration error. Please check your setup.",
    "user-not-found": "Invalid email or password.",
    "wrong-password": "Invalid email or password.",
    "invalid-credential": "Invalid email or password.",
    "user-disabled": "This account has been disabled.",
    "too-many-requests": "Too many attempts. Please try again later.",
}

LANDING_PAGES = {
    Role.ADMIN: "/admin/dashboard",
    Role.CUSTOMER: "/customer/dashboard",
}


def map_auth_error(error: AuthProviderError, fallback: str) -> AuthenticationError:
    """Translate a provider error into a user-facing AuthenticationError."""
    return AuthenticationError(AUTH_ERROR_MESSAGES.get(error.code, fallback), provider_code=error.code)


class SessionState(str, Enum):
    AUTHENTICATING = "authenticating"
    ROLE_RESOLVING = "role_resolving"
    READY = "ready"


class Identity(BaseModel):
    uid: str
    email: Optional[str] = None


class SessionContext:
    """Session owned by one app instance or one request.

    Only ``IdentityResolver.handle_session_change`` mutates it. ``loading`` is
    true until role resolution has finished.
    """

    def __init__(self):
        self.identity: Optional[Identity] = None
        self.role: Role = Role.NONE
        self.state: SessionState = SessionState.AUTHENTICATING

    @property
    def loading(self) -> bool:
        return self.state != SessionState.READY

    @property
    def current_user(self) -> Optional[Identity]:
        return self.identity

    def __repr__(self):
        uid = self.identity.uid if self.identity else None
        return f"SessionContext(uid={uid!r}, role={self.role.value!r}, state={self.state.value!r})"


SessionListener = Callable[[SessionContext], None]


class IdentityResolver:
    """Resolves provider sessions to roles.

    State machine per session change:
    ``authenticating -> role_resolving -> ready(role)``, or straight to
    ``ready(none)`` when there is no identity.
    """

    def __init__(self, auth: Optional[Auth] = None, role_records=None, context: Optional[SessionContext] = None):
        self.auth = auth or Auth()
        self._role_records = role_records
        self.context = context or SessionContext()
        self._listeners: List[SessionListener] = []

    @property
    def role_records(self):
        if self._role_records is None:
            self._role_records = Db.get_instance().collections["users"]
        return self._role_records

    def current_session(self) -> SessionContext:
        return self.context

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Observe session changes. Returns a function that unsubscribes."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, state: SessionState):
        self.context.state = state
        for listener in list(self._listeners):
            listener(self.context)

    def handle_session_change(self, identity: Optional[Identity], claims: Optional[Dict[str, Any]] = None) -> SessionContext:
        """Apply a provider session change and resolve the role."""
        self.context.identity = identity
        self.context.role = Role.NONE
        self._transition(SessionState.AUTHENTICATING)

        if identity is None:
            self._transition(SessionState.READY)
            return self.context

        self._transition(SessionState.ROLE_RESOLVING)
        try:
            role = self._role_record(identity.uid).stored_role()
        except Exception as e:
            logger.error(f"Error getting user role for {identity.uid}: {e}")
            role = Role.NONE
        if role is None:
            role = self._repair_role_record(identity, claims or {})
        self.context.role = role
        self._transition(SessionState.READY)
        return self.context

    def resolve_token(self, id_token: Optional[str]) -> SessionContext:
        """Resolve the session carried by a provider ID token."""
        if not id_token:
            return self.handle_session_change(None)
        try:
            claims = self.auth.verify_id_token(id_token)
        except Exception as e:
            logger.warning(f"Rejected ID token: {e}")
            return self.handle_session_change(None)
        return self.handle_session_change(Identity(uid=claims["uid"], email=claims.get("email")), claims)

    def _role_record(self, uid: str) -> RoleRecord:
        return RoleRecord(uid, collection_ref=self.role_records, fetch=False)

    def lookup_role(self, uid: str) -> Role:
        """Role from the Role Record. Missing records and lookup errors read as ``none``."""
        try:
            return self._role_record(uid).stored_role() or Role.NONE
        except Exception as e:
            logger.error(f"Error getting user role for {uid}: {e}")
            return Role.NONE

    def _repair_role_record(self, identity: Identity, claims: Dict[str, Any]) -> Role:
        """Re-create a missing Role Record from the role claim stamped at signup.

        Only called after a read found no record. The write never replaces an
        existing record; if one appeared meanwhile, its role wins.
        """
        claimed = parse_role(claims.get("role"))
        if claimed == Role.NONE:
            return Role.NONE
        try:
            created = self._role_record(identity.uid).create_if_missing(
                {"email": identity.email, "role": claimed.value}
            )
        except Exception as e:
            logger.error(f"Could not repair role record for {identity.uid}: {e}")
            return Role.NONE
        if not created:
            return self.lookup_role(identity.uid)
        logger.info(f"Repaired role record for {identity.uid} as {claimed.value}")
        return claimed

    def signup(self, email: str, password: str, role: str) -> Credential:
        """Create a credential and its Role Record, then resolve the new session.

        Raises:
            ValidationError: If ``role`` is not admin or customer
            AuthenticationError: With a user-facing message on any failure
        """
        requested = parse_role(role)
        if requested == Role.NONE:
            raise ValidationError("Role must be 'admin' or 'customer'", field="role")

        try:
            credential = self.auth.create_account(email, password)
        except AuthProviderError as e:
            logger.error(f"Signup failed for {email}: {e.code} {e.message}")
            raise map_auth_error(e, SIGNUP_FALLBACK_MESSAGE) from e

        try:
            self.auth.set_role_claim(credential.uid, requested.value)
        except Exception as e:
            # The Role Record below is authoritative; the claim only enables repair
            logger.warning(f"Could not set role claim for {credential.uid}: {e}")

        try:
            self._role_record(credential.uid).create_doc(
                {"email": email, "role": requested.value}
            )
        except Exception as e:
            logger.error(f"Account {credential.uid} created but role record write failed: {e}")
            raise AuthenticationError(SIGNUP_FALLBACK_MESSAGE) from e

        logger.info(f"Created {requested.value} account {credential.uid}")
        self.handle_session_change(Identity(uid=credential.uid, email=credential.email or email))
        return credential

    def login(self, email: str, password: str) -> Credential:
        """Sign in and resolve the session. Errors use the same mapping as signup."""
        try:
            credential = self.auth.sign_in(email, password)
        except AuthProviderError as e:
            logger.warning(f"Login failed for {email}: {e.code}")
            raise map_auth_error(e, LOGIN_FALLBACK_MESSAGE) from e

        claims: Dict[str, Any] = {}
        if credential.idToken:
            try:
                claims = self.auth.verify_id_token(credential.idToken)
            except Exception as e:
                logger.warning(f"Could not read claims for {credential.uid}: {e}")

        self.handle_session_change(Identity(uid=credential.uid, email=credential.email or email), claims)
        return credential

    def logout(self) -> None:
        """End the provider session; returns once the session is signed out."""
        if self.context.identity is not None:
            self.auth.sign_out(self.context.identity.uid)
        self.handle_session_change(None)


def landing_destination(session: SessionContext) -> Optional[str]:
    """Where the landing page sends a signed-in user; None keeps them on ``/``."""
    if session.loading or session.identity is None:
        return None
    return LANDING_PAGES.get(session.role)
