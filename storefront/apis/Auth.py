"""Authentication provider wrapper around Firebase Auth."""

from typing import Optional, Dict, Any

import requests
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError
from pydantic import BaseModel

from storefront.config.env_loader import get_emulator_host, get_web_api_key
from storefront.util.logger import get_logger

logger = get_logger(__name__)

SIGN_IN_PATH = "identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"

# Identity Toolkit error messages -> provider codes
REST_ERROR_CODES = {
    "EMAIL_EXISTS": "email-already-in-use",
    "WEAK_PASSWORD": "weak-password",
    "INVALID_EMAIL": "invalid-email",
    "MISSING_PASSWORD": "missing-password",
    "CONFIGURATION_NOT_FOUND": "configuration-not-found",
    "EMAIL_NOT_FOUND": "user-not-found",
    "INVALID_PASSWORD": "wrong-password",
    "INVALID_LOGIN_CREDENTIALS": "invalid-credential",
    "USER_DISABLED": "user-disabled",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "too-many-requests",
}


class Credential(BaseModel):
    """Result of creating an account or signing in."""

    uid: str
    email: Optional[str] = None
    idToken: Optional[str] = None
    refreshToken: Optional[str] = None


class AuthProviderError(Exception):
    """Provider failure normalized to a code such as ``weak-password``."""

    def __init__(self, code: str, message: str = ""):
        super().__init__(message or code)
        self.code = code
        self.message = message or code


def code_from_message(message: str) -> Optional[str]:
    """Find a known Identity Toolkit error code inside a provider message."""
    for rest_code, code in REST_ERROR_CODES.items():
        if rest_code in message:
            return code
    return None


class Auth:
    """Thin wrapper over ``firebase_admin.auth`` plus the password sign-in endpoint.

    The Admin SDK cannot verify passwords, so sign-in goes through the
    Identity Toolkit REST API (the auth emulator when it is configured).
    """

    def create_account(self, email: str, password: str) -> Credential:
        try:
            user = auth.create_user(email=email, password=password)
        except auth.EmailAlreadyExistsError as e:
            raise AuthProviderError("email-already-in-use", str(e)) from e
        except auth.ConfigurationNotFoundError as e:
            raise AuthProviderError("configuration-not-found", str(e)) from e
        except ValueError as e:
            # The Admin SDK validates arguments locally before calling the backend
            message = str(e).lower()
            code = "weak-password" if "password" in message else "invalid-email" if "email" in message else "invalid-argument"
            raise AuthProviderError(code, str(e)) from e
        except FirebaseError as e:
            raise AuthProviderError(code_from_message(str(e)) or "internal", str(e)) from e

        return Credential(uid=user.uid, email=user.email)

    def sign_in(self, email: str, password: str) -> Credential:
        try:
            response = requests.post(
                self._sign_in_url(),
                json={"email": email, "password": password, "returnSecureToken": True},
                timeout=30,
            )
        except requests.RequestException as e:
            raise AuthProviderError("network-request-failed", str(e)) from e

        body: Dict[str, Any] = response.json() if response.content else {}
        if response.status_code != 200:
            message = body.get("error", {}).get("message", "")
            raise AuthProviderError(code_from_message(message) or "internal", message)

        return Credential(
            uid=body["localId"],
            email=body.get("email", email),
            idToken=body.get("idToken"),
            refreshToken=body.get("refreshToken"),
        )

    def sign_out(self, uid: str) -> None:
        auth.revoke_refresh_tokens(uid)

    def verify_id_token(self, id_token: str) -> Dict[str, Any]:
        return auth.verify_id_token(id_token, check_revoked=True)

    def set_role_claim(self, uid: str, role: str) -> None:
        auth.set_custom_user_claims(uid, {"role": role})

    def _sign_in_url(self) -> str:
        key = get_web_api_key()
        emulator_host = get_emulator_host("auth")
        if emulator_host:
            return f"http://{emulator_host}/{SIGN_IN_PATH}?key={key}"
        return f"https://{SIGN_IN_PATH}?key={key}"
