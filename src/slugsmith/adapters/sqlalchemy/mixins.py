"""SQLAlchemy ORM mixin – SlugMixin."""
from __future__ import annotations

import functools

from sqlalchemy import String, UniqueConstraint, inspect
from sqlalchemy.orm import Mapped, mapped_column

from slugsmith.config.validation import ConfigurationError
from slugsmith.kernel.slugs import SluggableMixin


class SlugMixin(SluggableMixin):
    """Adds a nullable, indexed ``slug`` column to a declarative model.

    Declare the source field with ``__slug__``; composite uniqueness is read
    from the table when the declaration leaves ``scope`` unset::

        class Article(SlugMixin, Base):
            __tablename__ = "articles"
            __table_args__ = (UniqueConstraint("slug", "locale"),)
            __slug__ = SlugDeclaration(source="title")

            id: Mapped[int] = mapped_column(primary_key=True)
            title: Mapped[str] = mapped_column(String(200))
            locale: Mapped[str] = mapped_column(String(8))

    Here ``Article.slug_scope_fields()`` is ``("locale",)``.
    """

    slug: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None, index=True)

    @classmethod
    def slug_scope_fields(cls) -> tuple[str, ...]:
        declared = cls.slug_declaration().scope
        if declared is not None:
            return declared
        return infer_scope_fields(cls)


@functools.cache
def infer_scope_fields(model: type[SluggableMixin]) -> tuple[str, ...]:
    """Attribute keys sharing a unique constraint or unique index with the slug column.

    Constraints that cover only the slug column add nothing.  Column names
    are mapped back to attribute keys, so ``Column("locale_code")`` mapped
    as ``locale`` yields ``"locale"``.
    """
    mapper = inspect(model)
    slug_field = model.slug_declaration().slug
    if slug_field not in mapper.column_attrs:
        raise ConfigurationError(
            f"{model.__name__} has no mapped column for slug field {slug_field!r}",
            detail={"record_type": model.__name__},
        )
    slug_columns = {column.name for column in mapper.column_attrs[slug_field].columns}
    keys_by_column = {
        column.name: prop.key for prop in mapper.column_attrs for column in prop.columns
    }

    fields: list[str] = []
    for table in mapper.tables:
        groups = [
            [column.name for column in constraint.columns]
            for constraint in table.constraints
            if isinstance(constraint, UniqueConstraint)
        ]
        groups += [[column.name for column in index.columns] for index in table.indexes if index.unique]
        for names in groups:
            if len(names) < 2 or not slug_columns.intersection(names):
                continue
            for name in names:
                key = keys_by_column.get(name)
                if name in slug_columns or key is None or key in fields:
                    continue
                fields.append(key)
    return tuple(fields)


__all__ = ["SlugMixin", "infer_scope_fields"]
