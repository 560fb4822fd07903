"""Root error class for the slugsmith error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every slugsmith error carries a stable ``code`` and a ``detail`` dict so
    a single JSON log line describes the failure.

    Args:
        message: Human-readable description.
        code: Machine-readable code (defaults to ``default_code``).
        detail: Extra diagnostic context; copied, never mutated.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        # Subclass constructors take different arguments; restore state directly.
        return (_restore, (type(self), self.args), self.__dict__.copy())

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict for structured logs."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


def _restore(cls: type[BaseError], args: tuple[Any, ...]) -> BaseError:
    err = cls.__new__(cls)
    err.args = args
    return err


__all__ = ["BaseError"]
