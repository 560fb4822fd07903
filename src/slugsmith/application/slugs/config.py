"""SlugConfiguration – the injected, validated slugging setup."""

from __future__ import annotations

import dataclasses

from slugsmith.application.slugs.resolver import UniquenessResolver
from slugsmith.application.slugs.slugifier import DefaultSlugifier, Slugifier
from slugsmith.config.settings.slugs import DEFAULT_MAX_ATTEMPTS, SlugSettings
from slugsmith.config.validation import ConfigurationError


@dataclasses.dataclass(frozen=True)
class SlugConfiguration:
    """Slugifier strategy plus the resolver's attempt bound.

    Built once at process start and passed to the coordinator; it is never
    mutated afterwards.
    """

    slugifier: Slugifier = dataclasses.field(default_factory=DefaultSlugifier)
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_settings(
        cls, settings: SlugSettings, *, slugifier: Slugifier | None = None
    ) -> "SlugConfiguration":
        """Build a configuration from :class:`SlugSettings`.

        An explicit *slugifier* wins over ``settings.strip_hyphens``.
        """
        return cls(
            slugifier=slugifier or DefaultSlugifier(strip_hyphens=settings.strip_hyphens),
            max_attempts=settings.max_attempts,
        )

    def validate(self) -> None:
        if self.slugifier is None or not callable(self.slugifier):
            raise ConfigurationError("No slugifier configured")
        if (
            isinstance(self.max_attempts, bool)
            or not isinstance(self.max_attempts, int)
            or self.max_attempts < 1
        ):
            raise ConfigurationError(
                f"max_attempts must be a positive integer, got {self.max_attempts!r}",
                detail={"max_attempts": self.max_attempts},
            )

    def build_resolver(self) -> UniquenessResolver:
        return UniquenessResolver(max_attempts=self.max_attempts, slugifier=self.slugifier)


__all__ = ["SlugConfiguration"]
