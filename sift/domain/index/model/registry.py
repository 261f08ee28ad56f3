"""Type registry - resolves (index, type) pairs reported in hits to document types."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from sift.domain.index.model.document_type import DocumentType
from sift.domain.shared.error import ConfigurationError, UnknownDocumentTypeError

# Engines without mapping types report this (or nothing) as the hit's _type
_TYPELESS = (None, "_doc")


@dataclass(frozen=True)
class Index:
    """A named index and the document types it declares."""

    name: str
    types: tuple[DocumentType, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))
        names = [t.name for t in self.types]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ConfigurationError(
                f"Index {self.name!r} declares duplicate types: {sorted(duplicates)}"
            )

    def type(self, name: str) -> DocumentType | None:
        """Get a document type by name."""
        return next((t for t in self.types if t.name == name), None)

    def type_names(self) -> list[str]:
        return [t.name for t in self.types]


class TypeRegistry:
    """Registry of the indexes a response may hydrate against.

    A hit's ``_index`` is matched against registered index names verbatim
    first. Failing that, the longest registered name that prefixes it up to an
    underscore wins, so concrete indexes like ``places_20170101`` resolve to
    ``places`` while ``placesholder`` does not.
    """

    def __init__(self, indexes: Iterable[Index]) -> None:
        self._indexes: dict[str, Index] = {}
        for index in indexes:
            if index.name in self._indexes:
                raise ConfigurationError(f"Index {index.name!r} registered twice")
            self._indexes[index.name] = index
        self._by_prefix = sorted(self._indexes, key=len, reverse=True)

    def get(self, name: str) -> Index | None:
        """Get an index by its registered name."""
        return self._indexes.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._indexes

    def __iter__(self) -> Iterator[str]:
        return iter(self._indexes)

    def __len__(self) -> int:
        return len(self._indexes)

    def names(self) -> list[str]:
        """List all registered index names."""
        return list(self._indexes.keys())

    def derive_index(self, index_name: str | None) -> Index | None:
        """Find the registered index a concrete index name belongs to."""
        if index_name is None:
            return None
        if index_name in self._indexes:
            return self._indexes[index_name]
        for name in self._by_prefix:
            if index_name.startswith(f"{name}_"):
                return self._indexes[name]
        return None

    def resolve(self, index_name: str | None, type_name: str | None) -> DocumentType:
        """Resolve a hit's (index, type) pair.

        Raises:
            UnknownDocumentTypeError: If no registered index declares the pair.
        """
        index = self.derive_index(index_name)
        document_type = index.type(type_name) if index and type_name else None
        if document_type is None and index and len(index.types) == 1 and type_name in _TYPELESS:
            document_type = index.types[0]
        if document_type is None:
            raise UnknownDocumentTypeError(index_name, type_name)
        return document_type
