"""Domain value objects."""

from .customer import CustomerEmail, CustomerName
from .identifiers import CustomerId, OrderId
from .order_item import OrderItem

__all__ = [
    "CustomerEmail",
    "CustomerId",
    "CustomerName",
    "OrderId",
    "OrderItem",
]
