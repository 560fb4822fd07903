"""SQLAlchemy adapter – slug column mixin, storage ports and flush listener."""
from slugsmith.adapters.sqlalchemy.existence import SqlAlchemySlugExistenceChecker
from slugsmith.adapters.sqlalchemy.listener import SlugFlushListener
from slugsmith.adapters.sqlalchemy.mixins import SlugMixin, infer_scope_fields
from slugsmith.adapters.sqlalchemy.prior_state import SqlAlchemyPriorStateReader
from slugsmith.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "SlugFlushListener",
    "SlugMixin",
    "SqlAlchemyPriorStateReader",
    "SqlAlchemySessionFactory",
    "SqlAlchemySlugExistenceChecker",
    "infer_scope_fields",
]
