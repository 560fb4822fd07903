"""SQLAlchemy adapter – SqlAlchemyPriorStateReader."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from slugsmith.adapters.sqlalchemy.existence import declaration_for
from slugsmith.kernel.errors import SlugStorageError
from slugsmith.kernel.slugs import PriorStateReader, Sluggable


class SqlAlchemyPriorStateReader(PriorStateReader):
    """Select the committed source column of a row by primary key.

    Reads the table, not the identity map, so in-memory edits pending in
    the current flush are not visible.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def read_source_value(self, record: Sluggable) -> str | None:
        model = type(record)
        declaration = declaration_for(model)
        stmt = select(getattr(model, declaration.source)).where(
            getattr(model, declaration.id) == record.get_id()
        )
        try:
            with self._session.no_autoflush:
                return self._session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise SlugStorageError(
                "read_source_value",
                f"Could not read persisted {declaration.source!r} of {model.__name__}",
                detail={"record_type": model.__name__, "record_id": str(record.get_id())},
                cause=exc,
            ) from exc


__all__ = ["SqlAlchemyPriorStateReader"]
