"""Slug ports – the record capability and the storage collaborators."""

from __future__ import annotations

import abc
from typing import Any, Protocol, runtime_checkable

from slugsmith.kernel.types.slug import ScopeConstraints


@runtime_checkable
class Sluggable(Protocol):
    """Capability implemented by every record type that carries a slug.

    The lifecycle coordinator ignores objects that do not satisfy this
    protocol.  :class:`~slugsmith.kernel.slugs.declaration.SluggableMixin`
    implements it from a static :class:`SlugDeclaration`.
    """

    def get_id(self) -> Any: ...
    def get_source_value(self) -> str | None: ...
    def get_scope_constraints(self) -> ScopeConstraints: ...
    def get_slug(self) -> str | None: ...
    def set_slug(self, slug: str) -> None: ...


class SlugExistenceChecker(abc.ABC):
    """Port: answer "is this slug already taken?" against the backing store.

    Implementations must compare the slug case-insensitively, require
    equality on every scope field and ignore the row whose identifier is
    *exclude_id*.  They must not write to the store.
    """

    @abc.abstractmethod
    def exists(
        self,
        record_type: type,
        candidate: str,
        scope: ScopeConstraints,
        exclude_id: Any | None,
    ) -> bool: ...


class PriorStateReader(abc.ABC):
    """Port: read the persisted source value of a record by identifier."""

    @abc.abstractmethod
    def read_source_value(self, record: Sluggable) -> str | None:
        """Return the stored source value, or ``None`` when no row exists."""


__all__ = ["PriorStateReader", "Sluggable", "SlugExistenceChecker"]
