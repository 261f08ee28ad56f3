"""SQLAlchemy implementation of BackingStore."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Column, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from sift.domain.index.port.store import BackingStore
from sift.domain.search.model.scope import Scope
from sift.domain.shared.error import ConfigurationError, StorageUnavailableError
from sift.infrastructure.persistence.database import get_session

logger = logging.getLogger(__name__)


class SqlAlchemyStore(BackingStore):
    """Loads ORM entities of one mapped class by primary key.

    Scope criteria become part of the ``WHERE`` clause; scope predicates are
    evaluated on the fetched entities. Entities are returned detached from the
    session they were loaded in.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        model: type[Any],
        id_column: Any = None,
    ) -> None:
        self.session_factory = session_factory
        self.model = model
        if id_column is None:
            id_column = self._primary_key(model)
        elif hasattr(id_column, "property"):
            # Mapped attribute such as City.slug
            id_column = id_column.property.columns[0]
        self.id_column = id_column
        self._id_attr = inspect(model).get_property_by_column(id_column).key

    @staticmethod
    def _primary_key(model: type[Any]) -> Column[Any]:
        primary_key = inspect(model).primary_key
        if len(primary_key) != 1:
            raise ConfigurationError(
                f"{model.__name__} needs exactly one primary key column, got {len(primary_key)}"
            )
        return primary_key[0]

    def _coerce_id(self, doc_id: str) -> Any:
        """Convert an engine-reported id to the key column's Python type."""
        try:
            python_type = self.id_column.type.python_type
        except NotImplementedError:
            return doc_id
        if isinstance(doc_id, python_type):
            return doc_id
        try:
            return python_type(doc_id)
        except (TypeError, ValueError):
            return None

    def load_many(self, ids: Sequence[str], scope: Scope | None = None) -> dict[str, Any]:
        """Load entities keyed by the ids they were requested with.

        Several requested ids may name the same row (``"1"`` and ``"01"`` on an
        integer key); each of them maps to the loaded entity.
        """
        requested: dict[Any, list[str]] = {}
        for doc_id in ids:
            key = self._coerce_id(doc_id)
            if key is not None:
                requested.setdefault(key, []).append(doc_id)
        keys = list(requested)
        if not keys:
            return {}

        stmt = select(self.model).where(self.id_column.in_(keys))
        if scope is not None and scope.criteria:
            stmt = stmt.where(*scope.criteria)

        try:
            with get_session(self.session_factory) as session:
                loaded = {
                    doc_id: entity
                    for entity in session.scalars(stmt)
                    if scope is None or scope.matches(entity)
                    for doc_id in requested.get(getattr(entity, self._id_attr), ())
                }
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                f"Failed to load {self.model.__name__} objects: {e}"
            ) from e

        logger.debug(
            "Fetched %d/%d %s rows", len(loaded), len(keys), self.model.__name__
        )
        return loaded
