from enum import Enum


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderStatus(str, Enum):
    NEW = "NEW"
    # Not written: cancel deletes the row.
    CANCELED = "CANCELED"
    FILLED = "FILLED"
