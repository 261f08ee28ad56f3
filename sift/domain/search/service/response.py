"""Response - typed accessors over one raw search-engine response."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from functools import cached_property
from typing import Any

from sift.domain.index.model.registry import Index, TypeRegistry
from sift.domain.search.model.options import LoadOptions
from sift.domain.search.model.result import Result
from sift.domain.search.service.hydrator import ResultHydrator
from sift.domain.search.service.loader import DEFAULT_BATCH_SIZE, ObjectLoader


def _section(data: Any, key: str) -> Mapping[str, Any]:
    """Return ``data[key]`` if it is a mapping, an empty mapping otherwise."""
    if isinstance(data, Mapping):
        value = data.get(key)
        if isinstance(value, Mapping):
            return value
    return {}


class Response:
    """Wraps a raw search response.

    Every accessor is computed on first access and cached. Missing sections
    never raise; they fall back to empty or zero values. Only ``results``,
    ``objects``, ``collection`` and ``object_hash`` consult the type registry,
    and only ``objects`` (and what builds on it) touches a backing store.

    Args:
        raw: The decoded response body.
        indexes: Indexes the hits may belong to, or a ready registry.
        load_options: Only/except/scope options for ``objects``.
        loaded_objects: Whether ``collection`` returns objects instead of results.
        batch_size: Maximum ids per backing-store load.
    """

    def __init__(
        self,
        raw: Mapping[str, Any] | None,
        *,
        indexes: TypeRegistry | Iterable[Index] = (),
        load_options: LoadOptions | Mapping[str, Any] | None = None,
        loaded_objects: bool = False,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self._raw: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
        self._registry = indexes if isinstance(indexes, TypeRegistry) else TypeRegistry(indexes)
        self._load_options = LoadOptions.build(load_options)
        self._loaded_objects = bool(loaded_objects)
        self._batch_size = batch_size

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._raw

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def load_options(self) -> LoadOptions:
        return self._load_options

    @property
    def loaded_objects(self) -> bool:
        return self._loaded_objects

    # -------------------------------------------------------------------------
    # Response fields
    # -------------------------------------------------------------------------

    @cached_property
    def hits(self) -> list[Mapping[str, Any]]:
        """Hit documents, verbatim and in engine order."""
        hits = _section(self._raw, "hits").get("hits")
        if not isinstance(hits, Sequence) or isinstance(hits, (str, bytes)):
            return []
        return [hit for hit in hits if isinstance(hit, Mapping)]

    @cached_property
    def total(self) -> int:
        """Total number of matching documents."""
        total = _section(self._raw, "hits").get("total")
        if isinstance(total, Mapping):
            total = total.get("value")
        return total if isinstance(total, int) else 0

    @cached_property
    def max_score(self) -> float | None:
        """Highest score among matches; ``None`` when the query was not scored."""
        score = _section(self._raw, "hits").get("max_score")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            return None
        return float(score)

    @cached_property
    def took(self) -> int:
        """Milliseconds the engine spent executing the query."""
        took = self._raw.get("took")
        return took if isinstance(took, int) else 0

    @cached_property
    def timed_out(self) -> bool:
        return bool(self._raw.get("timed_out", False))

    @cached_property
    def terminated_early(self) -> bool:
        return bool(self._raw.get("terminated_early", False))

    @cached_property
    def suggest(self) -> Mapping[str, Any]:
        """Suggestion entries keyed by suggestion name."""
        return _section(self._raw, "suggest")

    @cached_property
    def aggs(self) -> Mapping[str, Any]:
        """Aggregation results keyed by aggregation name."""
        return _section(self._raw, "aggregations")

    @property
    def aggregations(self) -> Mapping[str, Any]:
        return self.aggs

    # -------------------------------------------------------------------------
    # Hydration
    # -------------------------------------------------------------------------

    @cached_property
    def results(self) -> list[Result]:
        """Typed results, one per hit.

        Raises:
            UnknownDocumentTypeError: If a hit's (index, type) is not registered.
        """
        return ResultHydrator(registry=self._registry).hydrate(self.hits)

    @cached_property
    def objects(self) -> list[Any]:
        """Loaded objects, one slot per hit; ``None`` where nothing was loaded."""
        loader = ObjectLoader(
            registry=self._registry,
            options=self._load_options,
            batch_size=self._batch_size,
        )
        return loader.load(self.hits)

    @cached_property
    def object_hash(self) -> dict[tuple[str | None, str | None, Any], Any]:
        """Loaded objects keyed by their hit's (index, type, id)."""
        return {
            (hit.get("_index"), hit.get("_type"), hit.get("_id")): obj
            for hit, obj in zip(self.hits, self.objects)
        }

    @property
    def collection(self) -> list[Result] | list[Any]:
        """Results, or loaded objects when the response was built with ``loaded_objects``."""
        return self.objects if self._loaded_objects else self.results

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.collection)

    def __repr__(self) -> str:
        return f"Response(total={self.total}, hits={len(self.hits)}, took={self.took})"
