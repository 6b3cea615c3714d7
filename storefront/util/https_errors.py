"""Translation of storefront errors into callable error responses."""

from firebase_functions import https_fn

from storefront.exceptions import ProjectError

ErrorCode = https_fn.FunctionsErrorCode

ERROR_CODE_MAP = {
    "VALIDATION_ERROR": ErrorCode.INVALID_ARGUMENT,
    "PERMISSION_DENIED": ErrorCode.PERMISSION_DENIED,
    "UNAUTHENTICATED": ErrorCode.UNAUTHENTICATED,
    "NOT_FOUND": ErrorCode.NOT_FOUND,
    "CONFLICT": ErrorCode.ABORTED,
    "AUTHENTICATION_FAILED": ErrorCode.UNAUTHENTICATED,
    "UNAVAILABLE": ErrorCode.UNAVAILABLE,
}


def to_https_error(error: ProjectError) -> https_fn.HttpsError:
    """Map a ProjectError to an HttpsError carrying its user-facing message.

    Codes without an entry (catalog, upload and config failures) become INTERNAL.
    """
    code = ERROR_CODE_MAP.get(error.code, ErrorCode.INTERNAL)
    details = {"code": error.code, **error.details} if error.details else {"code": error.code}
    return https_fn.HttpsError(code, error.message, details)
