from typing import Optional


class OrderServiceError(Exception):
    """Base exception for the order service."""
    pass


class InvalidOrder(OrderServiceError):
    """Inbound order payload failed validation."""
    pass


class InvalidId(OrderServiceError):
    """Order identifier is not a positive integer."""

    def __init__(self, message: str = "Invalid id"):
        super().__init__(message)


class NotFound(OrderServiceError):
    def __init__(self, message: str = "Order not found"):
        super().__init__(message)


class PersistenceError(OrderServiceError):
    """Store unreachable, statement failure or timeout."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail or message
