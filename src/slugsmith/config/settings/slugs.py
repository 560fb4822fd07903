"""Config settings – SlugSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from slugsmith.config.settings.base import Settings
from slugsmith.config.validation import InvalidSettingValueError

DEFAULT_MAX_ATTEMPTS = 100


@dataclasses.dataclass
class SlugSettings(Settings):
    """Tunables for slug generation.

    Environment variables (via :class:`EnvSettingsLoader`):

    * ``SLUGSMITH_MAX_ATTEMPTS`` – suffixed candidates probed before giving up.
    * ``SLUGSMITH_STRIP_HYPHENS`` – trim leading/trailing hyphens from slugs.
    """

    _prefix: ClassVar[str] = "SLUGSMITH"

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    strip_hyphens: bool = False

    def _validate(self) -> None:
        self._require_positive_int("max_attempts")
        if not isinstance(self.strip_hyphens, bool):
            raise InvalidSettingValueError("strip_hyphens", self.strip_hyphens, "must be a boolean")


__all__ = ["DEFAULT_MAX_ATTEMPTS", "SlugSettings"]
