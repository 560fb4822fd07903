"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any

from slugsmith.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and override :meth:`_validate`; validation runs
    on every construction, whether from a loader or directly in code.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Hook for field checks; the base class accepts anything."""

    def _require_positive_int(self, name: str) -> None:
        value: Any = getattr(self, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSettingValueError(name, value, "must be an integer")
        if value < 1:
            raise InvalidSettingValueError(name, value, "must be >= 1")


__all__ = ["Settings"]
