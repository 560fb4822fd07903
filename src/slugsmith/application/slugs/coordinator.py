"""SlugLifecycleCoordinator – assign a slug before a record is written.

Per write event::

    Idle -> CheckEligible -> Skip
                          -> CheckChanged -> Skip
                                          -> ComputeBase -> ResolveUnique -> Assign

Any failure along the way surfaces as :class:`SlugOperationError` and the
host aborts the write.  This is the only place that sets a slug.
"""

from __future__ import annotations

import enum
import functools

from slugsmith.application.slugs.change_detector import ChangeDetector
from slugsmith.application.slugs.config import SlugConfiguration
from slugsmith.kernel.errors import SlugOperationError
from slugsmith.kernel.slugs.ports import PriorStateReader, Sluggable, SlugExistenceChecker
from slugsmith.kernel.types.slug import ScopeConstraints
from slugsmith.observability.logging import get_logger

_log = get_logger(__name__, component="coordinator")


class SlugOutcome(str, enum.Enum):
    """Terminal state of one :meth:`SlugLifecycleCoordinator.on_before_write` call."""

    SKIPPED_UNSUPPORTED = "skipped_unsupported"
    SKIPPED_NO_SOURCE = "skipped_no_source"
    SKIPPED_UNCHANGED = "skipped_unchanged"
    ASSIGNED = "assigned"

    @property
    def assigned(self) -> bool:
        return self is SlugOutcome.ASSIGNED


class SlugLifecycleCoordinator:
    """Interceptor the host calls right before each create / update.

    Args:
        config: Validated slugging configuration.
        existence: Store-backed "is this slug taken?" check.
        prior_state: Reads the persisted source value; without one every
            update of an already-slugged record regenerates.
    """

    def __init__(
        self,
        config: SlugConfiguration,
        existence: SlugExistenceChecker,
        prior_state: PriorStateReader | None = None,
    ) -> None:
        config.validate()
        self._config = config
        self._existence = existence
        self._resolver = config.build_resolver()
        self._detector = ChangeDetector(prior_state)

    @property
    def config(self) -> SlugConfiguration:
        return self._config

    def on_before_write(self, record: object) -> SlugOutcome:
        if not isinstance(record, Sluggable):
            return SlugOutcome.SKIPPED_UNSUPPORTED

        record_type = type(record).__name__
        base_slug: str | None = None
        try:
            source = record.get_source_value()
            if source is None or not source.strip():
                return SlugOutcome.SKIPPED_NO_SOURCE

            if not self._detector.needs_regeneration(record):
                return SlugOutcome.SKIPPED_UNCHANGED

            base_slug = self._config.slugifier(source)
            if base_slug is None or not base_slug.strip():
                raise SlugOperationError(
                    f"Generated base slug is null or blank for value: {source!r}",
                    record_type=record_type,
                )

            scope = ScopeConstraints.coerce(record.get_scope_constraints())
            exists = functools.partial(self._existence.exists, type(record))
            slug = self._resolver.resolve(base_slug, scope, record.get_id(), exists)
            if not slug or not slug.strip():
                raise SlugOperationError(
                    f"Generated slug is blank for base: {base_slug!r}",
                    record_type=record_type,
                    base_slug=base_slug,
                )
            record.set_slug(slug)
        except SlugOperationError:
            raise
        except Exception as exc:
            _log.error(
                "slug.failed",
                record_type=record_type,
                base_slug=base_slug,
                error=repr(exc),
            )
            reason = getattr(exc, "message", None) or str(exc) or type(exc).__name__
            raise SlugOperationError(
                f"Slug generation failed for {record_type} (base slug {base_slug!r}): {reason}",
                record_type=record_type,
                base_slug=base_slug,
                cause=exc,
            ) from exc

        _log.debug("slug.assigned", record_type=record_type, base_slug=base_slug, slug=slug)
        return SlugOutcome.ASSIGNED


__all__ = ["SlugLifecycleCoordinator", "SlugOutcome"]
