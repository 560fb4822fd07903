"""Slug value objects – a resolved slug and the uniqueness scope it lives in."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterator, Mapping
from typing import Any, Final

from slugsmith.kernel.errors.domain import InvalidSlugError

# Leading/trailing hyphens are legal: the default slugifier does not trim them.
_SLUG_PATTERN: Final = re.compile(r"[a-z0-9-]+")


@dataclasses.dataclass(frozen=True, slots=True)
class Slug:
    """A resolved slug: lowercase ASCII letters, digits and hyphens."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _SLUG_PATTERN.fullmatch(self.value):
            raise InvalidSlugError(self.value)

    def __str__(self) -> str:
        return self.value


class ScopeConstraints(Mapping[str, Any]):
    """Immutable field-name → value mapping narrowing slug uniqueness.

    An empty scope means the slug is unique per record type.  Fields whose
    value is ``None`` are dropped: a scope field with no value imposes no
    constraint.
    """

    __slots__ = ("_items",)

    def __init__(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        merged = dict(values or {})
        merged.update(kwargs)
        self._items: dict[str, Any] = {k: v for k, v in merged.items() if v is not None}

    @classmethod
    def empty(cls) -> "ScopeConstraints":
        return cls()

    @classmethod
    def coerce(cls, values: Mapping[str, Any] | None) -> "ScopeConstraints":
        """Return *values* as a :class:`ScopeConstraints`, wrapping plain mappings."""
        if isinstance(values, ScopeConstraints):
            return values
        return cls(values)

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"ScopeConstraints({self._items!r})"

    def matches(self, values: Mapping[str, Any]) -> bool:
        """Return ``True`` when *values* agrees with every constraint."""
        return all(values.get(key) == value for key, value in self._items.items())

    def as_dict(self) -> dict[str, Any]:
        return dict(self._items)


__all__ = ["ScopeConstraints", "Slug"]
