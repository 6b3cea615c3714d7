"""Custom exception classes for the storefront backend."""

from typing import Optional, Dict, Any


class ProjectError(Exception):
    """Base exception class for storefront errors.

    The message is always safe to show to a user; underlying causes are
    chained with ``raise ... from`` and logged, never copied into it.
    """

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize ProjectError.

        Args:
            message: User-facing error message
            code: Optional error code
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code or "PROJECT_ERROR"
        self.details = details or {}


class ValidationError(ProjectError):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize ValidationError.

        Args:
            message: Error message
            field: Optional field that failed validation
            details: Optional additional error details
        """
        if field:
            details = details or {}
            details["field"] = field

        super().__init__(message, code="VALIDATION_ERROR", details=details)


class AccessDeniedError(ProjectError):
    """Raised when a signed-in identity lacks the role a view requires."""

    def __init__(self, message: str = "Permission denied", resource: Optional[str] = None):
        details = {"resource": resource} if resource else {}
        super().__init__(message, code="PERMISSION_DENIED", details=details)


class UnauthenticatedError(ProjectError):
    """Raised when a protected view is requested without an identity."""

    def __init__(self, message: str = "You must be signed in to continue."):
        super().__init__(message, code="UNAUTHENTICATED")


class NotFoundError(ProjectError):
    """Raised when a resource is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        """Initialize NotFoundError.

        Args:
            resource_type: Type of resource not found
            resource_id: ID of resource not found
        """
        message = f"{resource_type} with ID '{resource_id}' not found"
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, code="NOT_FOUND", details=details)


class ConflictError(ProjectError):
    """Raised when a conditional write finds the record changed underneath it."""

    def __init__(self, resource_type: str, resource_id: str):
        message = f"{resource_type} '{resource_id}' was modified by someone else. Reload and try again."
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, code="CONFLICT", details=details)


class AuthenticationError(ProjectError):
    """Raised when signup or login fails. The message is user-facing."""

    def __init__(self, message: str, provider_code: Optional[str] = None):
        details = {"provider_code": provider_code} if provider_code else {}
        super().__init__(message, code="AUTHENTICATION_FAILED", details=details)


class CatalogError(ProjectError):
    """Generic failure of a catalog operation, e.g. ``Failed to add product``."""

    def __init__(self, message: str):
        super().__init__(message, code="CATALOG_ERROR")


class UploadError(ProjectError):
    """Raised when an asset upload fails."""

    def __init__(self, message: str = "Failed to upload image"):
        super().__init__(message, code="UPLOAD_FAILED")


class ConfigError(ProjectError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, variable: Optional[str] = None):
        details = {"variable": variable} if variable else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)
