"""Observability – structlog helpers.

``get_logger(name)`` returns a bound structlog logger; slug components bind
``component`` so every event can be traced back to the stage that emitted it.
"""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a lazily configured structlog logger.

    Safe to call at import time: configuration is resolved on first use, so
    :meth:`JsonLoggerFactory.configure` still applies to module-level loggers.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.get_logger(name, **initial_values)


__all__ = ["get_logger"]
