"""Fixtures for SQL-backed stores: an in-memory SQLite places database."""

from collections.abc import Iterator

import pytest
from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from sift.config import DatabaseConfig
from sift.infrastructure.persistence.database import create_db_engine, create_session_factory


class Base(DeclarativeBase):
    pass


class CityRow(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64))
    rating: Mapped[int] = mapped_column(Integer)
    slug: Mapped[str] = mapped_column(String(64), unique=True)


class CountryRow(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64))
    rating: Mapped[int] = mapped_column(Integer)
    slug: Mapped[str] = mapped_column(String(64), unique=True)


@pytest.fixture
def session_factory() -> Iterator[sessionmaker[Session]]:
    engine = create_db_engine(DatabaseConfig(url="sqlite:///:memory:"))
    Base.metadata.create_all(engine)
    factory = create_session_factory(engine)

    with factory() as session:
        session.add_all(
            [CityRow(id=i + 1, name=f"city {i}", rating=i, slug=f"city-{i}") for i in range(2)]
            + [
                CountryRow(id=i + 1, name=f"country {i}", rating=i + 2, slug=f"country-{i}")
                for i in range(2)
            ]
        )
        session.commit()

    yield factory
    engine.dispose()


@pytest.fixture
def city_model() -> type[CityRow]:
    return CityRow


@pytest.fixture
def country_model() -> type[CountryRow]:
    return CountryRow
