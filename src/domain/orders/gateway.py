from typing import List, Optional, Protocol

from src.domain.orders.dtos.order_dto import OrderDraftDTO, OrderDTO


class OrderGateway(Protocol):
    """
    Storage contract for orders.

    Every method is a self-contained unit of work and raises
    PersistenceError on store failure.
    """

    async def create(self, draft: OrderDraftDTO) -> OrderDTO: ...
    async def get(self, order_id: int) -> Optional[OrderDTO]: ...
    async def list(self, limit: int) -> List[OrderDTO]: ...
    async def cancel(self, order_id: int) -> Optional[OrderDTO]: ...
