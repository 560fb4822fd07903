"""Application-layer errors – failures surfaced to the host write path."""

from __future__ import annotations

from typing import Any

from slugsmith.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class SlugOperationError(ApplicationError):
    """Umbrella error raised to abort a pending write.

    Wraps resolver, configuration and collaborator failures; the original
    exception is always available as ``cause`` / ``__cause__``.
    """

    default_code = "slug_operation_failed"

    def __init__(
        self,
        message: str = "An error occurred during slug operation",
        *,
        record_type: str | None = None,
        base_slug: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if record_type is not None:
            detail.setdefault("record_type", record_type)
        if base_slug is not None:
            detail.setdefault("base_slug", base_slug)
        super().__init__(message, detail=detail, **kwargs)
        self.record_type = record_type
        self.base_slug = base_slug


__all__ = ["ApplicationError", "SlugOperationError"]
