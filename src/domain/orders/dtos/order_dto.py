from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict

from src.commons.enums.order_enums import OrderSide, OrderStatus


class OrderDraftDTO(BaseModel):
    """
    Validated order request, not yet persisted.
    """

    symbol: str = Field(..., min_length=1)
    side: OrderSide
    quantity: float = Field(..., gt=0.0)
    price: float = Field(..., gt=0.0)


class OrderDTO(OrderDraftDTO):
    """
    Persisted order as returned to clients.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., gt=0)
    status: OrderStatus = OrderStatus.NEW
    created_at: datetime

    def to_response(self) -> dict:
        """JSON-ready dict: enums as values, created_at as ISO-8601."""
        return self.model_dump(mode="json")
