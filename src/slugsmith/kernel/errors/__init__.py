"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── InvalidSlugInputError
    │   ├── InvalidSlugError
    │   └── ExhaustedAttemptsError
    ├── ApplicationError       (application.py)
    │   ├── SlugOperationError
    │   └── ConfigError        (slugsmith.config.validation)
    │       └── ConfigurationError
    └── InfrastructureError    (infrastructure.py)
        └── SlugStorageError
"""

from slugsmith.kernel.errors.application import ApplicationError, SlugOperationError
from slugsmith.kernel.errors.base import BaseError
from slugsmith.kernel.errors.domain import (
    DomainError,
    ExhaustedAttemptsError,
    InvalidSlugError,
    InvalidSlugInputError,
)
from slugsmith.kernel.errors.infrastructure import InfrastructureError, SlugStorageError

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
