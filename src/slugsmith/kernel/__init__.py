"""Kernel – framework-agnostic building blocks."""

from slugsmith.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExhaustedAttemptsError,
    InfrastructureError,
    InvalidSlugError,
    InvalidSlugInputError,
    SlugOperationError,
    SlugStorageError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExhaustedAttemptsError",
    "InfrastructureError",
    "InvalidSlugError",
    "InvalidSlugInputError",
    "SlugOperationError",
    "SlugStorageError",
]
