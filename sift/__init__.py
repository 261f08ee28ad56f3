"""sift - hydrate raw search-engine responses into typed results and live objects."""

from sift.domain.index.model.document_type import DocumentType, define_type
from sift.domain.index.model.registry import Index, TypeRegistry
from sift.domain.index.port.store import BackingStore
from sift.domain.search.model.options import LoadOptions, TypeLoadOptions
from sift.domain.search.model.result import Result
from sift.domain.search.model.scope import Scope
from sift.domain.search.service.factory import ResponseFactory
from sift.domain.search.service.response import Response
from sift.domain.shared.error import (
    ConfigurationError,
    SiftError,
    StorageUnavailableError,
    UnknownDocumentTypeError,
    UnsupportedScopeError,
)
from sift.infrastructure.memory.store import InMemoryStore

__all__ = [
    "BackingStore",
    "ConfigurationError",
    "DocumentType",
    "InMemoryStore",
    "Index",
    "LoadOptions",
    "Response",
    "ResponseFactory",
    "Result",
    "Scope",
    "SiftError",
    "StorageUnavailableError",
    "TypeLoadOptions",
    "TypeRegistry",
    "UnknownDocumentTypeError",
    "UnsupportedScopeError",
    "define_type",
]
