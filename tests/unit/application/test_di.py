"""Unit tests for the dependency injection container."""

from unittest.mock import patch

from sift import Index, LoadOptions, Response, ResponseFactory, TypeRegistry
from sift.application.di import create_container
from sift.config import Config
from sift.domain.index.model.document_type import DocumentType


class TestContainer:
    def test_provides_response_factory(self):
        config = Config(_env_file=None, loader={"batch_size": 10})
        container = create_container([Index(name="places", types=[DocumentType("city")])], config)

        factory = container.get(ResponseFactory)

        assert factory.batch_size == 10
        assert factory.registry is container.get(TypeRegistry)
        assert "places" in factory.registry
        container.close()

    def test_indexes_built_from_session_factory(self):
        seen = []

        def build_indexes(session_factory):
            seen.append(session_factory)
            return [Index(name="places")]

        container = create_container(build_indexes, Config(_env_file=None))

        registry = container.get(TypeRegistry)

        assert registry.names() == ["places"]
        assert len(seen) == 1
        container.close()

    def test_fixed_indexes_do_not_open_a_database(self):
        with patch("sift.infrastructure.persistence.di.create_db_engine") as create_engine:
            container = create_container([Index(name="places")], Config(_env_file=None))
            container.get(ResponseFactory)
            container.close()

        create_engine.assert_not_called()


class TestResponseFactory:
    def test_build(self, raw_response, places_index):
        factory = ResponseFactory(registry=TypeRegistry([places_index]), batch_size=2)

        response = factory.build(raw_response, load_options={"only": "city"}, loaded_objects=True)

        assert isinstance(response, Response)
        assert response.loaded_objects is True
        assert response.collection[2:] == [None, None]

    def test_default_options(self, raw_response, places_index, cities):
        factory = ResponseFactory(
            registry=TypeRegistry([places_index]),
            default_options=LoadOptions(only={"city"}),
        )

        assert factory.build(raw_response).objects == [*cities, None, None]
