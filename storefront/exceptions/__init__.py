"""Exceptions package initialization."""

from .CustomError import (
    ProjectError,
    ValidationError,
    AccessDeniedError,
    UnauthenticatedError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    CatalogError,
    UploadError,
    ConfigError,
)

__all__ = [
    "ProjectError",
    "ValidationError",
    "AccessDeniedError",
    "UnauthenticatedError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "CatalogError",
    "UploadError",
    "ConfigError",
]
