"""Testing fakes – in-memory doubles for kernel ports."""
from slugsmith.testing.fakes.slug_store import InMemorySlugStore, StoredRow

__all__ = ["InMemorySlugStore", "StoredRow"]
