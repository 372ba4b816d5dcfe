import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from src.commons.enums.order_enums import OrderSide, OrderStatus
from src.domain.orders.dtos.order_dto import OrderDraftDTO, OrderDTO
from src.domain.orders.errors import PersistenceError
from src.infrastructure.database.client import PostgresClient
from src.infrastructure.database.models.order_model import OrderModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrderRepository:
    """
    PostgreSQL-backed order gateway.

    Each call opens its own session, so no connection is held between two
    calls. Driver errors and timeouts surface as PersistenceError.
    """

    def __init__(self, db_client: PostgresClient, statement_timeout: float = 5.0) -> None:
        """
        Initialize repository.

        Args:
            db_client: Database client owning the connection pool
            statement_timeout: Upper bound in seconds for each operation
        """
        self.db_client = db_client
        self.statement_timeout = statement_timeout

    async def _run(self, operation: str, fn: Callable[..., Awaitable[T]], *args: Any) -> T:
        async def _unit() -> T:
            # connects and creates the schema on first use if startup could not
            await self.db_client.init()
            return await fn(*args)

        try:
            return await asyncio.wait_for(_unit(), timeout=self.statement_timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Order {operation} timed out after {self.statement_timeout}s")
            raise PersistenceError(
                f"Failed to {operation} order",
                detail=f"timed out after {self.statement_timeout}s",
            ) from e
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"❌ Order {operation} failed: {e}")
            raise PersistenceError(f"Failed to {operation} order", detail=str(e)) from e

    async def create(self, draft: OrderDraftDTO) -> OrderDTO:
        """
        Insert a NEW order.

        Args:
            draft: Validated order request

        Returns:
            Stored order with id and created_at assigned
        """
        return await self._run("create", self._create, draft)

    async def get(self, order_id: int) -> Optional[OrderDTO]:
        """Get order by ID, None when absent."""
        return await self._run("get", self._get, order_id)

    async def list(self, limit: int) -> List[OrderDTO]:
        """Most recent orders first, at most `limit` rows."""
        return await self._run("list", self._list, limit)

    async def cancel(self, order_id: int) -> Optional[OrderDTO]:
        """Delete the order and return it, None when no row matched."""
        return await self._run("cancel", self._cancel, order_id)

    async def _create(self, draft: OrderDraftDTO) -> OrderDTO:
        model = OrderModel(
            symbol=draft.symbol,
            side=draft.side.value,
            quantity=draft.quantity,
            price=draft.price,
            status=OrderStatus.NEW.value,
        )

        async with self.db_client.get_session() as session:
            session.add(model)
            await session.commit()
            await session.refresh(model)

        return self._model_to_dto(model)

    async def _get(self, order_id: int) -> Optional[OrderDTO]:
        stmt = select(OrderModel).where(OrderModel.id == order_id)

        async with self.db_client.get_session() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if not model:
            return None

        return self._model_to_dto(model)

    async def _list(self, limit: int) -> List[OrderDTO]:
        stmt = select(OrderModel).order_by(OrderModel.id.desc()).limit(limit)

        async with self.db_client.get_session() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()

        return [self._model_to_dto(m) for m in models]

    async def _cancel(self, order_id: int) -> Optional[OrderDTO]:
        stmt = (
            delete(OrderModel)
            .where(OrderModel.id == order_id)
            .returning(*OrderModel.__table__.c)
        )

        async with self.db_client.get_session() as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
            await session.commit()

        if row is None:
            return None

        return self._row_to_dto(row)

    def _model_to_dto(self, model: OrderModel) -> OrderDTO:
        return OrderDTO(
            id=model.id,
            symbol=model.symbol,
            side=OrderSide(model.side),
            quantity=model.quantity,
            price=model.price,
            status=OrderStatus(model.status),
            created_at=model.created_at,
        )

    def _row_to_dto(self, row) -> OrderDTO:
        return OrderDTO(
            id=row["id"],
            symbol=row["symbol"],
            side=OrderSide(row["side"]),
            quantity=row["quantity"],
            price=row["price"],
            status=OrderStatus(row["status"]),
            created_at=row["created_at"],
        )
