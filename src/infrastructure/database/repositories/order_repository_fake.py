import asyncio
from typing import Dict, List, Optional

from src.commons.enums.order_enums import OrderStatus
from src.domain.orders.dtos.order_dto import OrderDraftDTO, OrderDTO
from src.infrastructure.database.models.base import utcnow


class InMemoryOrderRepository:
    """
    Order gateway kept in process memory:
    - ids increase monotonically and are never reused
    - cancel removes the order, same as the PostgreSQL gateway
    - nothing survives a restart
    """

    def __init__(self) -> None:
        self._orders: Dict[int, OrderDTO] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, draft: OrderDraftDTO) -> OrderDTO:
        async with self._lock:
            order = OrderDTO(
                id=self._next_id,
                status=OrderStatus.NEW,
                created_at=utcnow(),
                **draft.model_dump(),
            )
            self._orders[order.id] = order
            self._next_id += 1
            return order

    async def get(self, order_id: int) -> Optional[OrderDTO]:
        return self._orders.get(order_id)

    async def list(self, limit: int) -> List[OrderDTO]:
        newest_first = sorted(self._orders.values(), key=lambda o: o.id, reverse=True)
        return newest_first[:limit]

    async def cancel(self, order_id: int) -> Optional[OrderDTO]:
        async with self._lock:
            return self._orders.pop(order_id, None)
