"""BackingStore port - load-by-ids access to the objects behind documents."""

from abc import abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from sift.domain.search.model.scope import Scope


class BackingStore(Protocol):
    """Protocol for stores that hold the live objects indexed documents represent.

    Implementations must not mutate the store and must only return objects
    the scope accepts.
    """

    @abstractmethod
    def load_many(
        self, ids: Sequence[str], scope: "Scope | None" = None
    ) -> Mapping[Any, Any]:
        """Load objects by identity.

        Args:
            ids: Document identities as reported by the search engine.
            scope: Filter the loaded objects must satisfy.

        Returns:
            Mapping of identity to object. Identities with no matching object
            are simply absent.
        """
        ...
