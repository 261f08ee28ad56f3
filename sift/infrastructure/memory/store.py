"""In-memory BackingStore - objects held in a mapping keyed by identity."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable

from sift.domain.index.port.store import BackingStore
from sift.domain.search.model.scope import Scope
from sift.domain.shared.error import UnsupportedScopeError


class InMemoryStore(BackingStore):
    """Store backed by a dict of identity to object.

    Identities are compared by their string form, matching how search
    engines report ``_id``. Scopes may only carry Python predicates.
    """

    def __init__(self, objects: Mapping[Any, Any] | None = None) -> None:
        self._objects: dict[str, Any] = {str(k): v for k, v in (objects or {}).items()}

    @classmethod
    def from_objects(
        cls, objects: Iterable[Any], key: Callable[[Any], Any] = lambda obj: obj.id
    ) -> "InMemoryStore":
        """Build a store from objects, keyed by ``key(obj)``."""
        return cls({key(obj): obj for obj in objects})

    def add(self, doc_id: Any, obj: Any) -> None:
        self._objects[str(doc_id)] = obj

    def load_many(self, ids: Sequence[str], scope: Scope | None = None) -> dict[str, Any]:
        if scope is not None and scope.criteria:
            raise UnsupportedScopeError(
                "InMemoryStore cannot evaluate SQL criteria; use predicate scopes"
            )
        loaded = {}
        for doc_id in ids:
            obj = self._objects.get(str(doc_id))
            if obj is None:
                continue
            if scope is None or scope.matches(obj):
                loaded[str(doc_id)] = obj
        return loaded

    def __len__(self) -> int:
        return len(self._objects)
