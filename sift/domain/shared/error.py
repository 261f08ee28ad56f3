"""Error hierarchy for sift.

Error layers:
- SiftError: Base class for all sift errors
- InfrastructureError: Setup mistakes and backing-store failures

Content irregularities in a search response (missing sections, fields that do
not coerce) are never raised; they degrade to defaults inside the layer.
"""


class SiftError(Exception):
    """Base class for all sift errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Infrastructure Errors (setup and storage failures)
# =============================================================================


class InfrastructureError(SiftError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Backing store (database) is unavailable or the load query failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""


class UnknownDocumentTypeError(ConfigurationError):
    """A hit references an (index, type) pair that no registered index declares."""

    def __init__(self, index_name: str | None, type_name: str | None) -> None:
        super().__init__(
            f"No document type registered for index={index_name!r} type={type_name!r}",
            code="UNKNOWN_DOCUMENT_TYPE",
        )
        self.index_name = index_name
        self.type_name = type_name


class UnsupportedScopeError(ConfigurationError):
    """A scope carries criteria the target store cannot evaluate."""
