"""Global test fixtures: a ``places`` index with city and country documents."""

from dataclasses import dataclass
from typing import Any

import pytest

from sift import Index, InMemoryStore, Result
from sift.domain.index.model.document_type import DocumentType


@dataclass(frozen=True)
class City:
    id: int
    name: str
    rating: int


@dataclass(frozen=True)
class Country:
    id: int
    name: str
    rating: int


class CityResult(Result):
    id: int | None = None
    name: str | None = None
    rating: int | None = None


class CountryResult(Result):
    id: int | None = None
    name: str | None = None
    rating: int | None = None


def make_hit(type_name: str, obj: Any, index: str = "places") -> dict[str, Any]:
    """A hit as the engine reports it for a query sorted by rating."""
    return {
        "_index": index,
        "_type": type_name,
        "_id": str(obj.id),
        "_score": None,
        "_source": {"id": obj.id, "name": obj.name, "rating": obj.rating},
        "sort": [obj.rating],
    }


@pytest.fixture
def cities() -> list[City]:
    return [City(id=i + 1, name=f"city {i}", rating=i) for i in range(2)]


@pytest.fixture
def countries() -> list[Country]:
    return [Country(id=i + 1, name=f"country {i}", rating=i + 2) for i in range(2)]


@pytest.fixture
def places_index(cities: list[City], countries: list[Country]) -> Index:
    return Index(
        name="places",
        types=(
            DocumentType("city", CityResult, InMemoryStore.from_objects(cities)),
            DocumentType("country", CountryResult, InMemoryStore.from_objects(countries)),
        ),
    )


@pytest.fixture
def raw_response(cities: list[City], countries: list[Country]) -> dict[str, Any]:
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": 4,
            "max_score": None,
            "hits": [
                *(make_hit("city", c) for c in cities),
                *(make_hit("country", c) for c in countries),
            ],
        },
    }
