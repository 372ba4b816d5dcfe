import math
from typing import Any

from src.commons.enums.order_enums import OrderSide
from src.domain.orders.dtos.order_dto import OrderDraftDTO
from src.domain.orders.errors import InvalidOrder

REQUIRED_SHAPE = "symbol, side(BUY/SELL), quantity>0, price>0 required"


def _invalid(reason: str) -> InvalidOrder:
    return InvalidOrder(f"Invalid order: {reason}; {REQUIRED_SHAPE}")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid quantity/price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def validate_order_payload(payload: Any) -> OrderDraftDTO:
    """
    Validate an untyped request payload and build an order draft.

    Rules are checked in order and the first failure wins:
    symbol, side, quantity, price.

    Raises:
        InvalidOrder: if any rule fails
    """
    if not isinstance(payload, dict):
        raise _invalid("body must be a JSON object")

    symbol = payload.get("symbol")
    if not isinstance(symbol, str) or not symbol:
        raise _invalid("symbol must be a non-empty string")

    side = payload.get("side")
    if not isinstance(side, str) or side not in (OrderSide.BUY.value, OrderSide.SELL.value):
        raise _invalid("side must be BUY or SELL")

    quantity = payload.get("quantity")
    if not _is_number(quantity) or quantity <= 0:
        raise _invalid("quantity must be a number > 0")

    price = payload.get("price")
    if not _is_number(price) or price <= 0:
        raise _invalid("price must be a number > 0")

    return OrderDraftDTO(
        symbol=symbol,
        side=OrderSide(side),
        quantity=float(quantity),
        price=float(price),
    )
