"""Static slug declarations for record types."""

from __future__ import annotations

import dataclasses
from typing import Any

from slugsmith.config.validation import ConfigurationError
from slugsmith.kernel.types.slug import ScopeConstraints


@dataclasses.dataclass(frozen=True, slots=True)
class SlugDeclaration:
    """Where a record type keeps its slug, its source text and its scope.

    ``scope=None`` leaves the scope undecided: storage adapters may infer
    it (e.g. from a composite unique constraint); otherwise uniqueness is
    per record type.  ``scope=()`` forces per-type uniqueness.

    Example::

        class Article(SluggableMixin):
            __slug__ = SlugDeclaration(source="title", scope=("locale",))
    """

    source: str
    slug: str = "slug"
    id: str = "id"
    scope: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not self.source:
            raise ConfigurationError("SlugDeclaration.source must name a field")
        if self.source == self.slug:
            raise ConfigurationError(
                f"Slug field {self.slug!r} cannot also be the source field"
            )
        if self.scope is not None:
            if not isinstance(self.scope, tuple):
                object.__setattr__(self, "scope", tuple(self.scope))
            if self.slug in self.scope:  # type: ignore[operator]
                raise ConfigurationError(
                    f"Slug field {self.slug!r} cannot be listed as a scope field"
                )


class SluggableMixin:
    """Implements :class:`~slugsmith.kernel.slugs.ports.Sluggable` from ``__slug__``.

    Subclasses set ``__slug__`` to a :class:`SlugDeclaration`.
    """

    @classmethod
    def slug_declaration(cls) -> SlugDeclaration:
        declaration = getattr(cls, "__slug__", None)
        if not isinstance(declaration, SlugDeclaration):
            raise ConfigurationError(
                f"{cls.__name__} mixes in SluggableMixin but declares no __slug__",
                detail={"record_type": cls.__name__},
            )
        return declaration

    @classmethod
    def slug_scope_fields(cls) -> tuple[str, ...]:
        """Fields sharing a uniqueness group with the slug (override point)."""
        return cls.slug_declaration().scope or ()

    def get_id(self) -> Any:
        return getattr(self, self.slug_declaration().id, None)

    def get_source_value(self) -> str | None:
        value = getattr(self, self.slug_declaration().source, None)
        return value if isinstance(value, str) else None

    def get_scope_constraints(self) -> ScopeConstraints:
        return ScopeConstraints({name: getattr(self, name) for name in self.slug_scope_fields()})

    def get_slug(self) -> str | None:
        return getattr(self, self.slug_declaration().slug, None)

    def set_slug(self, slug: str) -> None:
        setattr(self, self.slug_declaration().slug, slug)


__all__ = ["SlugDeclaration", "SluggableMixin"]
