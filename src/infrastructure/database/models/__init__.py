from .base import Base, BaseModel
from .order_model import OrderModel


__all__ = [
    "Base",
    "BaseModel",
    "OrderModel",
]
