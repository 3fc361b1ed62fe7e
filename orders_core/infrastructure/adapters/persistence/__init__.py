from .in_memory_customer_repository import InMemoryCustomerRepository
from .in_memory_order_repository import InMemoryOrderRepository

__all__ = ["InMemoryCustomerRepository", "InMemoryOrderRepository"]
