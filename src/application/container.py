from dependency_injector import containers, providers
from src.infrastructure.database.client import PostgresClient
from src.infrastructure.config.settings import Settings
from src.infrastructure.database.repositories.order_repository import OrderRepository
from src.infrastructure.database.repositories.order_repository_fake import InMemoryOrderRepository


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(Settings)

    db_client = providers.Singleton(
        PostgresClient,
        db_url=config.provided.async_database_url,
        pool_size=config.provided.db_pool_size,
        max_overflow=config.provided.db_max_overflow,
        pool_timeout=config.provided.db_pool_timeout,
        pool_recycle=config.provided.db_pool_recycle,
        echo=config.provided.db_echo,
        create_schema=config.provided.db_create_schema,
    )

    order_gateway = providers.Selector(
        config.provided.order_store.value,
        postgres=providers.Singleton(
            OrderRepository,
            db_client=db_client,
            statement_timeout=config.provided.db_statement_timeout,
        ),
        memory=providers.Singleton(InMemoryOrderRepository),
    )

    # health probes the store only when orders live in PostgreSQL
    health_db_client = providers.Selector(
        config.provided.order_store.value,
        postgres=db_client,
        memory=providers.Object(None),
    )


container = Container()
