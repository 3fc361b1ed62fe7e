"""Application-level errors raised by use-case services."""


class ApplicationError(Exception):
    """Base class for application errors."""


class OrderValidationError(ApplicationError, ValueError):
    """Incoming request failed application-level validation."""


class OrderNotFoundError(ApplicationError):
    """No order exists with the requested id."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


# Lives in the Order context: it is the Order context that decides what a
# failed customer check means when placing an order.
class CustomerNotFoundError(ApplicationError):
    """Referenced customer does not exist."""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} not found")


__all__ = [
    "ApplicationError",
    "OrderValidationError",
    "OrderNotFoundError",
    "CustomerNotFoundError",
]
