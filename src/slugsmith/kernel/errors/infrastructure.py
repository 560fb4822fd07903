"""Infrastructure errors – storage adapter failures."""

from __future__ import annotations

from typing import Any

from slugsmith.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a slugging rule violation."""

    default_code = "infrastructure_error"


class SlugStorageError(InfrastructureError):
    """A storage round-trip made on behalf of slugging failed."""

    default_code = "slug_storage_error"

    def __init__(self, operation: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Slug storage operation '{operation}' failed", **kwargs)
        self.operation = operation


__all__ = ["InfrastructureError", "SlugStorageError"]
