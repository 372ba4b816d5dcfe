import logging
import re
from typing import Any, List, Optional, Tuple

from src.domain.orders.dtos.order_dto import OrderDTO
from src.domain.orders.errors import InvalidId, NotFound
from src.domain.orders.gateway import OrderGateway
from src.domain.orders.validation import validate_order_payload

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
MIN_LIMIT = 1
MAX_LIMIT = 500
# ids are BIGINT
MAX_ORDER_ID = 2**63 - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _parse_decimal(raw: Any) -> Optional[int]:
    text = str(raw).strip()
    if not _DECIMAL.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # beyond the interpreter int-string conversion limit
        return None


def parse_limit(raw: Optional[Any]) -> int:
    """
    Parse the `limit` query parameter.

    Missing or non-integer input falls back to DEFAULT_LIMIT, anything else
    is clamped to [MIN_LIMIT, MAX_LIMIT]. Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_LIMIT
    value = _parse_decimal(raw)
    if value is None:
        return DEFAULT_LIMIT
    return max(MIN_LIMIT, min(MAX_LIMIT, value))


def parse_order_id(raw: Any) -> int:
    """Parse a path id; raises InvalidId unless it is a positive integer."""
    if isinstance(raw, bool):
        raise InvalidId()
    if isinstance(raw, int):
        value = raw
    else:
        value = _parse_decimal(raw)
        if value is None:
            raise InvalidId()
    if value <= 0 or value > MAX_ORDER_ID:
        raise InvalidId()
    return value


class OrderService:
    def __init__(self, gateway: OrderGateway):
        self.gateway = gateway

    async def create_order(self, payload: Any) -> Tuple[OrderDTO, str]:
        """
        Validate and persist a new order.

        Returns:
            The created order and its location (/orders/{id})

        Raises:
            InvalidOrder: payload rejected, nothing is written
            PersistenceError: store failure
        """
        draft = validate_order_payload(payload)
        order = await self.gateway.create(draft)

        logger.info(
            f"Order created: id={order.id} {order.side.value} "
            f"{order.quantity} {order.symbol} @ {order.price}"
        )
        return order, f"/orders/{order.id}"

    async def get_order(self, raw_id: Any) -> OrderDTO:
        order_id = parse_order_id(raw_id)
        order = await self.gateway.get(order_id)
        if order is None:
            raise NotFound()
        return order

    async def list_orders(self, raw_limit: Optional[Any] = None) -> List[OrderDTO]:
        limit = parse_limit(raw_limit)
        return await self.gateway.list(limit)

    async def cancel_order(self, raw_id: Any) -> dict:
        """
        Cancel an order by removing it from the store.

        Raises:
            InvalidId: id is not a positive integer, the store is not contacted
            NotFound: no order with that id
            PersistenceError: store failure
        """
        order_id = parse_order_id(raw_id)
        deleted = await self.gateway.cancel(order_id)
        if deleted is None:
            logger.warning(f"Cancel requested for unknown order id={order_id}")
            raise NotFound()

        logger.info(f"Order cancelled: id={deleted.id}")
        return {"status": "deleted", "id": deleted.id}
