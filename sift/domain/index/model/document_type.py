"""Document types - what a hit of a given (index, type) pair means."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import create_model

from sift.domain.index.port.store import BackingStore
from sift.domain.search.model.result import Result
from sift.domain.shared.error import ConfigurationError

# Search-engine mapping type → Python type used for coercion
_MAPPING_TYPES: dict[str, Any] = {
    "text": str,
    "keyword": str,
    "string": str,
    "integer": int,
    "long": int,
    "short": int,
    "byte": int,
    "float": float,
    "double": float,
    "half_float": float,
    "scaled_float": float,
    "boolean": bool,
    "date": datetime,
    "object": dict[str, Any],
    "nested": list[dict[str, Any]],
}


@dataclass(frozen=True, eq=False)
class DocumentType:
    """A document type declared by an index.

    Attributes:
        name: Type name as reported in a hit's ``_type``.
        result: Result subclass hits of this type hydrate into.
        store: Where the live objects behind these documents are loaded from.
    """

    name: str
    result: type[Result] = Result
    store: BackingStore | None = None

    @property
    def id_field(self) -> str:
        return self.result.__id_field__

    def hydrate(self, hit: Mapping[str, Any]) -> Result:
        return self.result.from_hit(hit)

    def require_store(self) -> BackingStore:
        if self.store is None:
            raise ConfigurationError(
                f"Document type {self.name!r} has no backing store to load objects from"
            )
        return self.store


def define_type(
    name: str,
    fields: dict[str, str | type | None] | None = None,
    *,
    store: BackingStore | None = None,
    id_field: str = "id",
) -> DocumentType:
    """Declare a document type from search-engine field mappings.

    ``fields`` maps field names to a mapping type name (``"integer"``,
    ``"keyword"``, ...), a Python type, or ``None`` for a field that is
    passed through uncoerced.
    """
    definitions: dict[str, Any] = {}
    for field_name, field_type in (fields or {}).items():
        definitions[field_name] = (_resolve_field_type(field_name, field_type) | None, None)
    definitions.setdefault(id_field, (Any, None))

    result = create_model(
        "".join(part.capitalize() for part in name.split("_")) or "Document",
        __base__=Result,
        **definitions,
    )
    if id_field != Result.__id_field__:
        result.__id_field__ = id_field
    return DocumentType(name=name, result=result, store=store)


def _resolve_field_type(field_name: str, field_type: str | type | None) -> Any:
    if field_type is None:
        return Any
    if isinstance(field_type, str):
        try:
            return _MAPPING_TYPES[field_type]
        except KeyError:
            raise ConfigurationError(
                f"Unknown mapping type {field_type!r} for field {field_name!r}"
            ) from None
    return field_type
