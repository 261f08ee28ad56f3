from collections.abc import Iterable

from dishka import Container, make_container

from sift.config import Config
from sift.domain.index.model.registry import Index
from sift.domain.search.util.di.provider import IndexesBuilder, SearchProvider
from sift.infrastructure.persistence.di import PersistenceProvider


def create_container(
    indexes: IndexesBuilder | Iterable[Index], config: Config | None = None
) -> Container:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()

    return make_container(
        PersistenceProvider(),
        SearchProvider(indexes),
        context={Config: config},
    )
