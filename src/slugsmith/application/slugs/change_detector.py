"""ChangeDetector – decide whether a record's slug must be (re)computed."""

from __future__ import annotations

from typing import Any, Final

from slugsmith.kernel.slugs.ports import PriorStateReader, Sluggable
from slugsmith.observability.logging import get_logger

_log = get_logger(__name__, component="change_detector")


class _Lookup:
    def __repr__(self) -> str:
        return "<lookup>"


LOOKUP: Final[Any] = _Lookup()
"""Sentinel: read the prior source value through the :class:`PriorStateReader`."""


class ChangeDetector:
    """Compare a record's current source value with the persisted one.

    Read-only.  Whenever the prior value cannot be established (no reader,
    no identifier, no stored row, or the read raises) the record counts as
    changed, so a stale slug is never kept by accident.
    """

    def __init__(self, prior_state: PriorStateReader | None = None) -> None:
        self._prior_state = prior_state

    def needs_regeneration(
        self,
        record: Sluggable,
        prior_source_value: str | None = LOOKUP,
    ) -> bool:
        slug = record.get_slug()
        if slug is None or not slug.strip():
            return True

        if prior_source_value is LOOKUP:
            found, prior_source_value = self._read_prior(record)
            if not found:
                return True
        elif prior_source_value is None:
            return True

        return record.get_source_value() != prior_source_value

    def _read_prior(self, record: Sluggable) -> tuple[bool, str | None]:
        record_type = type(record).__name__
        if self._prior_state is None:
            _log.debug("slug.prior_state_unavailable", record_type=record_type, reason="no_reader")
            return False, None
        if record.get_id() is None:
            _log.debug("slug.prior_state_unavailable", record_type=record_type, reason="no_id")
            return False, None
        try:
            value = self._prior_state.read_source_value(record)
        except Exception as exc:  # noqa: BLE001 – fail open to regeneration
            _log.warning(
                "slug.prior_state_unreadable",
                record_type=record_type,
                record_id=str(record.get_id()),
                error=repr(exc),
            )
            return False, None
        if value is None:
            _log.debug("slug.prior_state_unavailable", record_type=record_type, reason="not_found")
            return False, None
        return True, value


__all__ = ["LOOKUP", "ChangeDetector"]
