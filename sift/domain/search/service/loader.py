"""ObjectLoader - resolves hits to the live objects they were indexed from."""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from sift.domain.index.model.document_type import DocumentType
from sift.domain.index.model.registry import TypeRegistry
from sift.domain.search.model.options import LoadOptions
from sift.domain.shared.service import Service

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 1000


def _batches(ids: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(ids), size):
        yield ids[start : start + size]


class ObjectLoader(Service):
    """Loads one object slot per hit, keeping positions aligned with the hits.

    A slot is ``None`` when the hit's type is filtered out by ``only`` or
    ``except``, when a scope rejects the object, or when the store has no
    object with that identity. Loads are batched per document type.
    """

    registry: TypeRegistry
    options: LoadOptions
    batch_size: int = DEFAULT_BATCH_SIZE

    def load(self, hits: Sequence[Mapping[str, Any]]) -> list[Any]:
        slots: list[Any] = [None] * len(hits)
        pending: dict[DocumentType, list[tuple[int, str]]] = {}

        for position, hit in enumerate(hits):
            document_type = self.registry.resolve(hit.get("_index"), hit.get("_type"))
            if not self.options.includes(document_type.name):
                continue
            if hit.get("_id") is None:
                continue
            pending.setdefault(document_type, []).append((position, str(hit["_id"])))

        for document_type, entries in pending.items():
            loaded = self._load_type(document_type, [doc_id for _, doc_id in entries])
            for position, doc_id in entries:
                slots[position] = loaded.get(doc_id)

        return slots

    def _load_type(self, document_type: DocumentType, ids: list[str]) -> dict[str, Any]:
        store = document_type.require_store()
        scope = self.options.scope_for(document_type.name)
        unique_ids = list(dict.fromkeys(ids))

        loaded: dict[str, Any] = {}
        for batch in _batches(unique_ids, self.batch_size):
            found = store.load_many(batch, scope)
            loaded.update((str(key), obj) for key, obj in found.items())

        logger.debug(
            "Loaded %d of %d %s objects (scoped=%s)",
            len(loaded),
            len(unique_ids),
            document_type.name,
            scope is not None,
        )
        return loaded
