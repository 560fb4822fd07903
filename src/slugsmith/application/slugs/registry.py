"""SlugRegistry – process-wide, configure-once slugging setup.

For hosts that cannot thread a :class:`SlugConfiguration` through their
write path.  Configure it during start-up; reads before that fail fast.
"""

from __future__ import annotations

import threading

from slugsmith.application.slugs.config import SlugConfiguration
from slugsmith.config.validation import ConfigurationError
from slugsmith.observability.logging import get_logger

_log = get_logger(__name__, component="registry")

_lock = threading.Lock()
_configuration: SlugConfiguration | None = None


class SlugRegistry:
    """Holds the single process-wide :class:`SlugConfiguration`."""

    @staticmethod
    def configure(configuration: SlugConfiguration) -> SlugConfiguration:
        global _configuration
        if configuration is None:
            raise ConfigurationError("SlugConfiguration cannot be None")
        configuration.validate()
        with _lock:
            if _configuration is not None:
                raise ConfigurationError("SlugRegistry is already configured")
            _configuration = configuration
        _log.info(
            "slug.registry_configured",
            slugifier=repr(configuration.slugifier),
            max_attempts=configuration.max_attempts,
        )
        return configuration

    @staticmethod
    def get() -> SlugConfiguration:
        configuration = _configuration
        if configuration is None:
            raise ConfigurationError("SlugRegistry is not configured")
        return configuration

    @staticmethod
    def is_configured() -> bool:
        return _configuration is not None

    @staticmethod
    def generate(text: str | None) -> str | None:
        """Slugify *text* with the configured strategy."""
        return SlugRegistry.get().slugifier(text)

    @staticmethod
    def clear() -> None:
        """Forget the configuration.  Test isolation only."""
        global _configuration
        with _lock:
            _configuration = None


__all__ = ["SlugRegistry"]
