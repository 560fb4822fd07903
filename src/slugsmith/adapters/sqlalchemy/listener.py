"""SQLAlchemy adapter – SlugFlushListener."""
from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import Session

from slugsmith.adapters.sqlalchemy.existence import SqlAlchemySlugExistenceChecker
from slugsmith.adapters.sqlalchemy.prior_state import SqlAlchemyPriorStateReader
from slugsmith.application.slugs import (
    SlugConfiguration,
    SlugLifecycleCoordinator,
    SlugOutcome,
    SlugRegistry,
)
from slugsmith.observability.logging import get_logger

_log = get_logger(__name__, component="sqlalchemy_listener")


class SlugFlushListener:
    """Runs the slug coordinator on every pending insert and update.

    Hooks ``before_flush`` on a :class:`~sqlalchemy.orm.Session` subclass
    or a :class:`~sqlalchemy.orm.sessionmaker`::

        listener = SlugFlushListener(SlugConfiguration())
        Session = sessionmaker(engine)
        listener.install(Session)

    Without an explicit *config* the process-wide :class:`SlugRegistry`
    configuration is used; it must be configured first.

    A :class:`~slugsmith.kernel.errors.SlugOperationError` raised here
    aborts the flush; nothing is written.
    """

    def __init__(
        self,
        config: SlugConfiguration | None = None,
        *,
        treat_existence_errors_as_missing: bool = False,
    ) -> None:
        if config is None:
            config = SlugRegistry.get()
        config.validate()
        self._config = config
        self._treat_existence_errors_as_missing = treat_existence_errors_as_missing

    def install(self, target: Any) -> None:
        if not event.contains(target, "before_flush", self.before_flush):
            event.listen(target, "before_flush", self.before_flush)

    def remove(self, target: Any) -> None:
        if event.contains(target, "before_flush", self.before_flush):
            event.remove(target, "before_flush", self.before_flush)

    def before_flush(self, session: Session, flush_context: Any, instances: Any) -> None:  # noqa: ARG002
        existence = SqlAlchemySlugExistenceChecker(
            session, treat_errors_as_missing=self._treat_existence_errors_as_missing
        )
        coordinator = SlugLifecycleCoordinator(
            self._config, existence, SqlAlchemyPriorStateReader(session)
        )
        assigned = 0
        for obj in [*session.new, *session.dirty]:
            if coordinator.on_before_write(obj) is SlugOutcome.ASSIGNED:
                existence.claim(obj)
                assigned += 1
        if assigned:
            _log.debug("slug.flush_processed", assigned=assigned)


__all__ = ["SlugFlushListener"]
