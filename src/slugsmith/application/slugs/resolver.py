"""UniquenessResolver – turn a base slug into a free one.

Probing is optimistic: two concurrent writers can both see ``post-2`` as
free.  Pair it with a unique index on (slug, scope...) in the store; the
index is the authoritative guard, the resolver only keeps collisions rare.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from slugsmith.application.slugs.slugifier import DefaultSlugifier, Slugifier
from slugsmith.config.settings.slugs import DEFAULT_MAX_ATTEMPTS
from slugsmith.config.validation import ConfigurationError
from slugsmith.kernel.errors import ExhaustedAttemptsError, InvalidSlugInputError
from slugsmith.kernel.types.slug import ScopeConstraints
from slugsmith.observability.logging import get_logger

ExistsFn = Callable[[str, ScopeConstraints, Any], bool]

_log = get_logger(__name__, component="resolver")


class UniquenessResolver:
    """Append ``-2``, ``-3``, … to a base slug until the store reports it free.

    ``max_attempts`` bounds the suffixed candidates: with the default of 100
    the resolver probes ``base`` and ``base-2`` … ``base-101`` and then
    raises :class:`ExhaustedAttemptsError`.
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        slugifier: Slugifier | None = None,
    ) -> None:
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be a positive integer, got {max_attempts!r}",
                detail={"max_attempts": max_attempts},
            )
        self._max_attempts = max_attempts
        self._slugifier = slugifier or DefaultSlugifier()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def resolve(
        self,
        base_slug: str | None,
        scope: Mapping[str, Any] | None,
        exclude_id: Any | None,
        exists: ExistsFn,
    ) -> str:
        """Return the first candidate for which ``exists`` answers ``False``.

        Raises:
            InvalidSlugInputError: *base_slug* is absent or normalises to blank.
            ExhaustedAttemptsError: every candidate within the bound is taken.

        Failures raised by ``exists`` propagate unchanged.
        """
        if base_slug is None or not base_slug.strip():
            raise InvalidSlugInputError("Base slug cannot be null or blank", value=base_slug)
        base = self._slugifier(base_slug)
        if base is None or not base.strip():
            raise InvalidSlugInputError(
                f"Slugified base is null or blank: {base_slug!r}", value=base_slug
            )

        scope = ScopeConstraints.coerce(scope)
        candidate = base
        suffix = 2
        attempts = 0
        while exists(candidate, scope, exclude_id):
            attempts += 1
            _log.debug("slug.collision", candidate=candidate, attempt=attempts, scope=scope.as_dict())
            if attempts > self._max_attempts:
                _log.warning("slug.exhausted", base_slug=base, attempts=attempts)
                raise ExhaustedAttemptsError(base, attempts, self._max_attempts)
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate


__all__ = ["ExistsFn", "UniquenessResolver"]
