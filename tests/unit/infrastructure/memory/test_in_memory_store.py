"""Unit tests for InMemoryStore."""

from types import SimpleNamespace

import pytest
from sqlalchemy import column

from sift import InMemoryStore, Scope, UnsupportedScopeError


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore.from_objects(
        [SimpleNamespace(id=1, rating=0), SimpleNamespace(id=2, rating=5)]
    )


class TestInMemoryStore:
    def test_load_many_by_string_ids(self, store: InMemoryStore):
        loaded = store.load_many(["1", "2"])

        assert set(loaded) == {"1", "2"}
        assert loaded["2"].rating == 5

    def test_missing_ids_are_absent(self, store: InMemoryStore):
        assert store.load_many(["3"]) == {}

    def test_scope_predicates_filter(self, store: InMemoryStore):
        loaded = store.load_many(["1", "2"], Scope(lambda obj: obj.rating > 2))

        assert list(loaded) == ["2"]

    def test_sql_criteria_unsupported(self, store: InMemoryStore):
        with pytest.raises(UnsupportedScopeError):
            store.load_many(["1"], Scope.where(column("rating") > 2))

    def test_add(self, store: InMemoryStore):
        store.add(3, "three")

        assert len(store) == 3
        assert store.load_many(["3"]) == {"3": "three"}
