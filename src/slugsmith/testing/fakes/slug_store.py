"""Testing fakes – InMemorySlugStore."""
from __future__ import annotations

import dataclasses
from typing import Any

from slugsmith.kernel.slugs import PriorStateReader, Sluggable, SlugExistenceChecker
from slugsmith.kernel.types import ScopeConstraints


@dataclasses.dataclass(frozen=True)
class StoredRow:
    """Snapshot of a record as it was last "persisted"."""

    record_type: type
    id: Any
    slug: str | None
    source: str | None
    scope: dict[str, Any]


class InMemorySlugStore(SlugExistenceChecker, PriorStateReader):
    """Dict-backed slug store for tests.

    ``add()`` snapshots a record the way a write would.  Every existence
    probe is appended to ``checked`` as ``(candidate, scope, exclude_id)``.
    Set ``fail_exists_with`` or ``fail_reads_with`` to make the matching
    calls raise that exception.
    """

    def __init__(self) -> None:
        self._rows: dict[tuple[type, Any], StoredRow] = {}
        self.checked: list[tuple[str, dict[str, Any], Any]] = []
        self.fail_exists_with: BaseException | None = None
        self.fail_reads_with: BaseException | None = None

    def add(self, record: Sluggable) -> StoredRow:
        row = StoredRow(
            record_type=type(record),
            id=record.get_id(),
            slug=record.get_slug(),
            source=record.get_source_value(),
            scope=dict(record.get_scope_constraints() or {}),
        )
        self._rows[(row.record_type, row.id)] = row
        return row

    def exists(
        self,
        record_type: type,
        candidate: str,
        scope: ScopeConstraints,
        exclude_id: Any | None,
    ) -> bool:
        scope = ScopeConstraints.coerce(scope)
        self.checked.append((candidate, dict(scope), exclude_id))
        if self.fail_exists_with is not None:
            raise self.fail_exists_with
        wanted = candidate.lower()
        for row in self._rows.values():
            if row.record_type is not record_type or row.slug is None:
                continue
            if exclude_id is not None and row.id == exclude_id:
                continue
            if row.slug.lower() == wanted and scope.matches(row.scope):
                return True
        return False

    def read_source_value(self, record: Sluggable) -> str | None:
        if self.fail_reads_with is not None:
            raise self.fail_reads_with
        row = self._rows.get((type(record), record.get_id()))
        return row.source if row is not None else None

    def slugs(self) -> list[str]:
        return [row.slug for row in self._rows.values() if row.slug is not None]


__all__ = ["InMemorySlugStore", "StoredRow"]
