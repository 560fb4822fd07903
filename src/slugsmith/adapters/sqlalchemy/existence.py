"""SQLAlchemy adapter – SqlAlchemySlugExistenceChecker."""
from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from slugsmith.config.validation import ConfigurationError
from slugsmith.kernel.errors import SlugStorageError
from slugsmith.kernel.slugs import SlugDeclaration, Sluggable, SlugExistenceChecker, SluggableMixin
from slugsmith.kernel.types import ScopeConstraints
from slugsmith.observability.logging import get_logger

_log = get_logger(__name__, component="sqlalchemy_existence")


def declaration_for(record_type: type) -> SlugDeclaration:
    if not (isinstance(record_type, type) and issubclass(record_type, SluggableMixin)):
        raise ConfigurationError(
            f"{getattr(record_type, '__name__', record_type)!s} is not a SluggableMixin model",
        )
    return record_type.slug_declaration()


class SqlAlchemySlugExistenceChecker(SlugExistenceChecker):
    """Count rows holding a candidate slug within a scope.

    Issues ``SELECT count(*) ... WHERE lower(slug) = :candidate`` plus one
    equality per scope field and ``id != :exclude_id``.  Queries run under
    ``no_autoflush`` so they are safe inside ``before_flush``.

    Slugs assigned earlier in the same flush are not in the table yet;
    :meth:`claim` registers them so they are also treated as taken.

    With ``treat_errors_as_missing=True`` a failing query is logged and
    answered with ``False`` (the slug is assumed free).  The default
    raises :class:`SlugStorageError`.
    """

    def __init__(self, session: Session, *, treat_errors_as_missing: bool = False) -> None:
        self._session = session
        self._treat_errors_as_missing = treat_errors_as_missing
        self._claimed: list[tuple[type, Any, str, dict[str, Any]]] = []

    def claim(self, record: Sluggable) -> None:
        slug = record.get_slug()
        if slug is not None:
            self._claimed.append(
                (type(record), record.get_id(), slug.lower(), dict(record.get_scope_constraints() or {}))
            )

    def exists(
        self,
        record_type: type,
        candidate: str,
        scope: ScopeConstraints,
        exclude_id: Any | None,
    ) -> bool:
        declaration = declaration_for(record_type)
        scope = ScopeConstraints.coerce(scope)
        if self._claimed_in_flush(record_type, candidate, scope, exclude_id):
            return True

        stmt = (
            select(func.count())
            .select_from(record_type)
            .where(func.lower(getattr(record_type, declaration.slug)) == candidate.lower())
        )
        if exclude_id is not None:
            stmt = stmt.where(getattr(record_type, declaration.id) != exclude_id)
        for name, value in scope.items():
            stmt = stmt.where(getattr(record_type, name) == value)

        try:
            with self._session.no_autoflush:
                count = self._session.execute(stmt).scalar_one()
        except SQLAlchemyError as exc:
            if self._treat_errors_as_missing:
                _log.warning(
                    "slug.existence_check_failed",
                    record_type=record_type.__name__,
                    candidate=candidate,
                    error=repr(exc),
                )
                return False
            raise SlugStorageError(
                "exists",
                f"Existence check for slug {candidate!r} on {record_type.__name__} failed",
                detail={"record_type": record_type.__name__, "candidate": candidate},
                cause=exc,
            ) from exc
        return count > 0

    def _claimed_in_flush(
        self,
        record_type: type,
        candidate: str,
        scope: ScopeConstraints,
        exclude_id: Any | None,
    ) -> bool:
        wanted = candidate.lower()
        for claimed_type, claimed_id, slug, claimed_scope in self._claimed:
            if not issubclass(claimed_type, record_type) and not issubclass(record_type, claimed_type):
                continue
            if exclude_id is not None and claimed_id == exclude_id:
                continue
            if slug == wanted and scope.matches(claimed_scope):
                return True
        return False


__all__ = ["SqlAlchemySlugExistenceChecker", "declaration_for"]
