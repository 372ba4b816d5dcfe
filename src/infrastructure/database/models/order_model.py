"""
Order Database Model

SQLAlchemy model for orders.
"""

from sqlalchemy import BigInteger, CheckConstraint, Column, Float, String

from src.commons.enums.order_enums import OrderStatus
from src.infrastructure.database.models.base import BaseModel


class OrderModel(BaseModel):
    """Order database model."""

    __tablename__ = 'orders'
    __table_args__ = (
        CheckConstraint("symbol <> ''", name="ck_orders_symbol_not_empty"),
        CheckConstraint("side IN ('BUY', 'SELL')", name="ck_orders_side"),
        CheckConstraint("quantity > 0", name="ck_orders_quantity_positive"),
        CheckConstraint("price > 0", name="ck_orders_price_positive"),
    )

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    symbol = Column(String, nullable=False)
    side = Column(String(4), nullable=False)
    quantity = Column(Float, nullable=False)
    price = Column(Float, nullable=False)
    status = Column(String(16), nullable=False, default=OrderStatus.NEW.value)
