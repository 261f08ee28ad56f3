"""Scope - filter applied to objects loaded from a backing store."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from sqlalchemy.sql.elements import ColumnElement

Predicate = Callable[[Any], bool]


class Scope:
    """A conjunction of object predicates and SQL criteria.

    Predicates are evaluated against loaded objects in Python. Criteria are
    SQLAlchemy boolean expressions that SQL-backed stores push into the
    ``WHERE`` clause of their load query. A candidate object is kept only when
    every predicate and every criterion accepts it.

    Scopes compose with ``&``::

        Scope(lambda city: city.rating > 2) & Scope.where(City.country == "NL")
    """

    __slots__ = ("_predicates", "_criteria")

    def __init__(
        self,
        predicate: Predicate | None = None,
        *,
        predicates: Iterable[Predicate] = (),
        criteria: Iterable[ColumnElement[bool]] = (),
    ) -> None:
        preds = tuple(predicates)
        if predicate is not None:
            preds = (predicate, *preds)
        self._predicates: tuple[Predicate, ...] = preds
        self._criteria: tuple[ColumnElement[bool], ...] = tuple(criteria)

    @classmethod
    def where(cls, *criteria: ColumnElement[bool]) -> Scope:
        """Build a scope from SQLAlchemy boolean expressions."""
        return cls(criteria=criteria)

    @classmethod
    def coerce(cls, value: Any) -> Scope | None:
        """Accept a Scope, a plain callable, a SQL expression or None."""
        if value is None or isinstance(value, Scope):
            return value
        if isinstance(value, ColumnElement):
            return cls.where(value)
        if callable(value):
            return cls(value)
        raise ValueError(f"Cannot build a scope from {type(value).__name__}")

    @property
    def predicates(self) -> tuple[Predicate, ...]:
        return self._predicates

    @property
    def criteria(self) -> tuple[ColumnElement[bool], ...]:
        return self._criteria

    def matches(self, obj: Any) -> bool:
        """Evaluate the Python predicates against a loaded object."""
        return all(predicate(obj) for predicate in self._predicates)

    def __and__(self, other: Scope | None) -> Scope:
        if other is None:
            return self
        if not isinstance(other, Scope):
            return NotImplemented
        return Scope(
            predicates=self._predicates + other._predicates,
            criteria=self._criteria + other._criteria,
        )

    def __bool__(self) -> bool:
        return bool(self._predicates or self._criteria)

    def __repr__(self) -> str:
        return f"Scope(predicates={len(self._predicates)}, criteria={len(self._criteria)})"


def combine(*scopes: Scope | None) -> Scope | None:
    """AND together the given scopes, ignoring missing ones."""
    combined: Scope | None = None
    for scope in scopes:
        if scope is None:
            continue
        combined = scope if combined is None else combined & scope
    return combined
