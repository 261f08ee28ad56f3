from dishka import Provider, Scope, from_context, provide
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from sift.config import Config
from sift.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # Factories require method syntax
    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> Engine:
        return create_db_engine(config.database)

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: Engine) -> sessionmaker[Session]:
        return create_session_factory(engine)
