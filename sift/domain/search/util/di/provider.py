from collections.abc import Callable, Iterable

from dishka import Provider, Scope, provide
from sqlalchemy.orm import Session, sessionmaker

from sift.config import Config
from sift.domain.index.model.registry import Index, TypeRegistry
from sift.domain.search.service.factory import ResponseFactory

IndexesBuilder = Callable[[sessionmaker[Session]], Iterable[Index]]


class SearchProvider(Provider):
    """Provides the type registry and the response factory.

    A builder callable receives the container's session factory so SQL-backed
    stores share its engine. Fixed indexes need no database at all.
    """

    def __init__(self, indexes: IndexesBuilder | Iterable[Index]) -> None:
        super().__init__()
        if callable(indexes):
            build = indexes

            def get_registry(session_factory: sessionmaker[Session]) -> TypeRegistry:
                return TypeRegistry(build(session_factory))

        else:
            fixed = list(indexes)

            def get_registry() -> TypeRegistry:
                return TypeRegistry(fixed)

        self.provide(get_registry, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_response_factory(self, registry: TypeRegistry, config: Config) -> ResponseFactory:
        return ResponseFactory(registry=registry, batch_size=config.loader.batch_size)
