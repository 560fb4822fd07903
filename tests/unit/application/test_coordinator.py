"""Unit tests for SlugLifecycleCoordinator."""

from __future__ import annotations

from typing import Any

import pytest

from slugsmith.application.slugs import SlugConfiguration, SlugLifecycleCoordinator, SlugOutcome
from slugsmith.application.slugs.slugifier import DefaultSlugifier
from slugsmith.config.validation import ConfigurationError
from slugsmith.kernel.errors import ExhaustedAttemptsError, SlugOperationError
from slugsmith.kernel.slugs import SlugDeclaration, SluggableMixin
from slugsmith.kernel.types import ScopeConstraints
from slugsmith.testing.fakes import InMemorySlugStore


class Article(SluggableMixin):
    __slug__ = SlugDeclaration(source="title", scope=("locale",))

    def __init__(
        self,
        id: int | None,
        title: str | None,
        locale: str | None = "en",
        slug: str | None = None,
    ) -> None:
        self.id = id
        self.title = title
        self.locale = locale
        self.slug = slug


class Tag(SluggableMixin):
    __slug__ = SlugDeclaration(source="name")

    def __init__(self, id: int | None, name: str | None) -> None:
        self.id = id
        self.name = name
        self.slug: str | None = None


class HandWritten:
    """Implements the Sluggable protocol without the mixin."""

    def __init__(self, id: int, text: str) -> None:
        self._id = id
        self._text = text
        self._slug: str | None = None

    def get_id(self) -> Any:
        return self._id

    def get_source_value(self) -> str | None:
        return self._text

    def get_scope_constraints(self) -> ScopeConstraints:
        return ScopeConstraints.empty()

    def get_slug(self) -> str | None:
        return self._slug

    def set_slug(self, slug: str) -> None:
        self._slug = slug


class DictScoped(HandWritten):
    """Returns a plain dict scope instead of ScopeConstraints."""

    def __init__(self, id: int, text: str, locale: str) -> None:
        super().__init__(id, text)
        self.locale = locale

    def get_scope_constraints(self) -> dict[str, Any]:  # type: ignore[override]
        return {"locale": self.locale}


class ExplodingSlugSetter(Tag):
    def set_slug(self, slug: str) -> None:
        raise AttributeError("read-only slug")


@pytest.fixture()
def store() -> InMemorySlugStore:
    return InMemorySlugStore()


@pytest.fixture()
def coordinator(store: InMemorySlugStore) -> SlugLifecycleCoordinator:
    return SlugLifecycleCoordinator(SlugConfiguration(), store, store)


def _write(coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore, record: Any) -> SlugOutcome:
    outcome = coordinator.on_before_write(record)
    store.add(record)
    return outcome


# ---------------------------------------------------------------------------
# Skips
# ---------------------------------------------------------------------------


class TestSkips:
    def test_unsupported_record(self, coordinator: SlugLifecycleCoordinator) -> None:
        assert coordinator.on_before_write(object()) is SlugOutcome.SKIPPED_UNSUPPORTED

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_blank_source_without_slug(self, coordinator: SlugLifecycleCoordinator, title: str | None) -> None:
        article = Article(1, title)
        assert coordinator.on_before_write(article) is SlugOutcome.SKIPPED_NO_SOURCE
        assert article.slug is None

    def test_blank_source_keeps_existing_slug(self, coordinator: SlugLifecycleCoordinator) -> None:
        article = Article(1, "  ", slug="old-slug")
        assert coordinator.on_before_write(article) is SlugOutcome.SKIPPED_NO_SOURCE
        assert article.slug == "old-slug"

    def test_unchanged_source(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        article = Article(1, "Hello World")
        _write(coordinator, store, article)
        store.checked.clear()

        assert coordinator.on_before_write(article) is SlugOutcome.SKIPPED_UNCHANGED
        assert article.slug == "hello-world"
        assert store.checked == []

    def test_outcome_assigned_flag(self) -> None:
        assert SlugOutcome.ASSIGNED.assigned
        assert not SlugOutcome.SKIPPED_UNCHANGED.assigned


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------


class TestAssign:
    def test_first_write(self, coordinator: SlugLifecycleCoordinator) -> None:
        article = Article(1, "Hello World!")
        assert coordinator.on_before_write(article) is SlugOutcome.ASSIGNED
        assert article.slug == "hello-world"

    def test_source_is_not_mutated(self, coordinator: SlugLifecycleCoordinator) -> None:
        article = Article(1, "Hello World!")
        coordinator.on_before_write(article)
        assert article.title == "Hello World!"

    def test_collision_gets_suffix(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        _write(coordinator, store, Article(1, "Hello World"))
        second = Article(2, "Hello, World")
        _write(coordinator, store, second)
        third = Article(3, "hello world")
        _write(coordinator, store, third)
        assert (second.slug, third.slug) == ("hello-world-2", "hello-world-3")

    def test_scope_isolation(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        english = Article(1, "Hello World", locale="en")
        french = Article(2, "Hello World", locale="fr")
        _write(coordinator, store, english)
        _write(coordinator, store, french)
        assert english.slug == french.slug == "hello-world"
        assert store.checked[-1] == ("hello-world", {"locale": "fr"}, 2)

    def test_global_uniqueness_without_scope(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        first, second = Tag(1, "Python"), Tag(2, "python")
        _write(coordinator, store, first)
        _write(coordinator, store, second)
        assert (first.slug, second.slug) == ("python", "python-2")

    def test_record_types_do_not_collide(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        tag = Tag(1, "Hello World")
        article = Article(1, "Hello World")
        _write(coordinator, store, tag)
        _write(coordinator, store, article)
        assert tag.slug == article.slug == "hello-world"

    def test_update_does_not_collide_with_itself(
        self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore
    ) -> None:
        article = Article(1, "Hello World")
        _write(coordinator, store, article)
        article.title = "Hello World!!"
        assert coordinator.on_before_write(article) is SlugOutcome.ASSIGNED
        assert article.slug == "hello-world"
        assert store.checked[-1][2] == 1

    def test_update_regenerates_on_change(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        article = Article(1, "Hello World")
        _write(coordinator, store, article)
        article.title = "Goodbye World"
        coordinator.on_before_write(article)
        assert article.slug == "goodbye-world"

    def test_prior_read_failure_regenerates(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        article = Article(1, "Hello World")
        _write(coordinator, store, article)
        store.fail_reads_with = RuntimeError("replica lag")
        assert coordinator.on_before_write(article) is SlugOutcome.ASSIGNED
        assert article.slug == "hello-world"

    def test_without_prior_state_reader_always_regenerates(self, store: InMemorySlugStore) -> None:
        coordinator = SlugLifecycleCoordinator(SlugConfiguration(), store)
        article = Article(1, "Hello World", slug="custom")
        assert coordinator.on_before_write(article) is SlugOutcome.ASSIGNED
        assert article.slug == "hello-world"

    def test_hand_written_sluggable(self, coordinator: SlugLifecycleCoordinator) -> None:
        record = HandWritten(5, "Hand Written")
        assert coordinator.on_before_write(record) is SlugOutcome.ASSIGNED
        assert record.get_slug() == "hand-written"

    def test_plain_dict_scope_with_collision(
        self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore
    ) -> None:
        assert _write(coordinator, store, DictScoped(1, "Same Text", "en")) is SlugOutcome.ASSIGNED
        second = DictScoped(2, "Same Text", "en")
        assert _write(coordinator, store, second) is SlugOutcome.ASSIGNED
        assert second.get_slug() == "same-text-2"
        other_locale = DictScoped(3, "Same Text", "fr")
        assert _write(coordinator, store, other_locale) is SlugOutcome.ASSIGNED
        assert other_locale.get_slug() == "same-text"

    def test_configured_slugifier_is_used(self, store: InMemorySlugStore) -> None:
        config = SlugConfiguration(slugifier=DefaultSlugifier(strip_hyphens=True))
        coordinator = SlugLifecycleCoordinator(config, store, store)
        article = Article(1, "  Hello  ")
        coordinator.on_before_write(article)
        assert article.slug == "hello"

    def test_default_slugifier_keeps_edge_hyphens(self, coordinator: SlugLifecycleCoordinator) -> None:
        article = Article(1, "  Hello  ")
        coordinator.on_before_write(article)
        assert article.slug == "-hello-"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_punctuation_only_source(self, coordinator: SlugLifecycleCoordinator) -> None:
        article = Article(1, "!!!???")
        with pytest.raises(SlugOperationError) as exc_info:
            coordinator.on_before_write(article)
        assert exc_info.value.record_type == "Article"
        assert article.slug is None

    def test_exhaustion_is_wrapped(self, store: InMemorySlugStore) -> None:
        coordinator = SlugLifecycleCoordinator(SlugConfiguration(max_attempts=2), store, store)
        for i, title in enumerate(["Post", "Post", "Post"], start=1):
            _write(coordinator, store, Article(i, title))

        article = Article(4, "Post")
        with pytest.raises(SlugOperationError) as exc_info:
            coordinator.on_before_write(article)
        err = exc_info.value
        assert isinstance(err.cause, ExhaustedAttemptsError)
        assert err.__cause__ is err.cause
        assert err.base_slug == "post"
        assert err.detail == {"record_type": "Article", "base_slug": "post"}
        assert "post" in err.message
        assert article.slug is None

    def test_existence_failure_is_wrapped(self, coordinator: SlugLifecycleCoordinator, store: InMemorySlugStore) -> None:
        store.fail_exists_with = RuntimeError("connection reset")
        article = Article(1, "Hello World")
        with pytest.raises(SlugOperationError) as exc_info:
            coordinator.on_before_write(article)
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert "connection reset" in exc_info.value.message
        assert article.slug is None

    def test_setter_failure_is_wrapped(self, coordinator: SlugLifecycleCoordinator) -> None:
        with pytest.raises(SlugOperationError) as exc_info:
            coordinator.on_before_write(ExplodingSlugSetter(1, "Hello"))
        assert isinstance(exc_info.value.cause, AttributeError)

    def test_blank_resolver_result_is_rejected(self, store: InMemorySlugStore) -> None:
        coordinator = SlugLifecycleCoordinator(SlugConfiguration(), store, store)
        coordinator._resolver.resolve = lambda *args: "   "  # type: ignore[method-assign]
        article = Article(1, "Hello")
        with pytest.raises(SlugOperationError, match="blank"):
            coordinator.on_before_write(article)
        assert article.slug is None

    def test_invalid_configuration(self, store: InMemorySlugStore) -> None:
        with pytest.raises(ConfigurationError):
            SlugLifecycleCoordinator(SlugConfiguration(max_attempts=0), store)
