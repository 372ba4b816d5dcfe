from fastapi import FastAPI
from dependency_injector import providers
from src.application.container import Container


def register_modules(app: FastAPI, root_container: Container):
    # Register Health Module
    from src.domain.health.module import HealthModule
    from src.domain.health.controller import router as health_router

    health_container = HealthModule(
        root=providers.DependenciesContainer(
            db_client=root_container.health_db_client,
            health_check_timeout=root_container.config.provided.health_check_timeout,
        )
    )
    health_container.wire(modules=["src.domain.health.controller"])

    app.include_router(health_router)
    app.state.health_container = health_container

    # Register Orders Module
    from src.domain.orders.module import OrdersModule
    from src.domain.orders.controller import router as orders_router

    orders_container = OrdersModule(
        root=providers.DependenciesContainer(
            order_gateway=root_container.order_gateway,
        )
    )
    orders_container.wire(modules=["src.domain.orders.controller"])

    app.include_router(orders_router)
    app.state.orders_container = orders_container
