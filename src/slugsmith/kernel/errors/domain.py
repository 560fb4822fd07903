"""Domain errors – the slug value itself cannot be produced."""

from __future__ import annotations

from typing import Any

from slugsmith.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a slugging rule is violated."""

    default_code = "domain_error"


class InvalidSlugInputError(DomainError):
    """The base slug is absent, or blank once normalised."""

    default_code = "invalid_slug_input"

    def __init__(self, message: str, *, value: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"value": value})
        super().__init__(message, **kwargs)
        self.value = value


class InvalidSlugError(DomainError):
    """A string is not a well-formed slug."""

    default_code = "invalid_slug"

    def __init__(self, value: object, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"value": value})
        super().__init__(
            f"Invalid slug (must be non-blank lowercase ASCII letters, digits and hyphens): {value!r}",
            **kwargs,
        )
        self.value = value


class ExhaustedAttemptsError(DomainError):
    """No free candidate was found within the configured attempt bound.

    Usually means many records share one base phrase, or the existence
    check always answers ``True``.
    """

    default_code = "slug_attempts_exhausted"

    def __init__(self, base_slug: str, attempts: int, max_attempts: int, **kwargs: Any) -> None:
        kwargs.setdefault(
            "detail",
            {"base_slug": base_slug, "attempts": attempts, "max_attempts": max_attempts},
        )
        super().__init__(
            f"Unable to generate unique slug for {base_slug!r} after {attempts} attempts",
            **kwargs,
        )
        self.base_slug = base_slug
        self.attempts = attempts
        self.max_attempts = max_attempts


__all__ = ["DomainError", "ExhaustedAttemptsError", "InvalidSlugError", "InvalidSlugInputError"]
