"""In-memory CustomerRepository."""
from typing import Dict, Optional

from orders_core.domain.entities.customer import Customer
from orders_core.domain.repositories.customer_repository import CustomerRepository


class InMemoryCustomerRepository(CustomerRepository):
    """Dictionary-backed customer storage."""

    def __init__(self):
        self._storage: Dict[str, Customer] = {}

    async def save(self, customer: Customer) -> None:
        self._storage[str(customer.id)] = customer

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._storage.get(customer_id)
