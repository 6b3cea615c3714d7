"""Access Gate: per-view render/redirect decisions from session state."""

from enum import Enum
from typing import Callable, Dict, Optional

from pydantic import BaseModel

from storefront.exceptions import AccessDeniedError, ProjectError, UnauthenticatedError
from storefront.models.util_types import Role
from storefront.services.identity_resolver import IdentityResolver, SessionContext

LOGIN_PATH = "/auth/login"
HOME_PATH = "/"

PROTECTED_PAGES: Dict[str, Role] = {
    "/admin/dashboard": Role.ADMIN,
    "/admin/products": Role.ADMIN,
    "/admin/orders": Role.ADMIN,
    "/customer/dashboard": Role.CUSTOMER,
    "/customer/shop": Role.CUSTOMER,
    "/customer/cart": Role.CUSTOMER,
    "/customer/orders": Role.CUSTOMER,
}


class GateDecision(str, Enum):
    LOADING = "loading"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_HOME = "redirect_home"
    RENDER = "render"


class GateOutcome(BaseModel):
    decision: GateDecision
    redirectTo: Optional[str] = None

    @property
    def renders_content(self) -> bool:
        # Nothing protected is shown while loading or redirecting
        return self.decision == GateDecision.RENDER


def decide(session: SessionContext, required_role: Role) -> GateDecision:
    if session.loading:
        return GateDecision.LOADING
    if session.identity is None:
        return GateDecision.REDIRECT_LOGIN
    if session.role != required_role:
        return GateDecision.REDIRECT_HOME
    return GateDecision.RENDER


class AccessGate:
    """Guard for one view. Re-evaluated on every session change when watched."""

    def __init__(self, required_role: Role, login_path: str = LOGIN_PATH, home_path: str = HOME_PATH):
        self.required_role = required_role
        self.login_path = login_path
        self.home_path = home_path

    def evaluate(self, session: SessionContext) -> GateOutcome:
        decision = decide(session, self.required_role)
        redirect_to = {
            GateDecision.REDIRECT_LOGIN: self.login_path,
            GateDecision.REDIRECT_HOME: self.home_path,
        }.get(decision)
        return GateOutcome(decision=decision, redirectTo=redirect_to)

    def watch(self, resolver: IdentityResolver, on_outcome: Callable[[GateOutcome], None]) -> Callable[[], None]:
        """Call ``on_outcome`` now and after every session change; returns unsubscribe."""
        on_outcome(self.evaluate(resolver.current_session()))
        return resolver.subscribe(lambda session: on_outcome(self.evaluate(session)))

    def enforce(self, session: SessionContext) -> SessionContext:
        """Raise unless the session may see this view.

        Raises:
            UnauthenticatedError: No identity (redirect to login)
            AccessDeniedError: Role mismatch (redirect home)
        """
        decision = decide(session, self.required_role)
        if decision == GateDecision.RENDER:
            return session
        if decision == GateDecision.REDIRECT_LOGIN:
            raise UnauthenticatedError()
        if decision == GateDecision.REDIRECT_HOME:
            raise AccessDeniedError(f"This page requires the {self.required_role.value} role.")
        raise ProjectError("Session is still loading", code="UNAVAILABLE")


def gate_for_page(path: str) -> Optional[AccessGate]:
    """Gate protecting ``path``, or None for public pages."""
    required_role = PROTECTED_PAGES.get(path.rstrip("/") or HOME_PATH)
    return AccessGate(required_role) if required_role else None
