"""Repository ports."""

from .customer_repository import CustomerRepository
from .order_repository import OrderRepository

__all__ = ["CustomerRepository", "OrderRepository"]
