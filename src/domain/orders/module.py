from dependency_injector import containers, providers
from .order_service import OrderService


class OrdersModule(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=[".controller"])
    root = providers.DependenciesContainer()

    order_service = providers.Factory(
        OrderService,
        gateway=root.order_gateway,
    )
