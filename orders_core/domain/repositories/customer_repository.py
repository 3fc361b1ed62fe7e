"""Repository interface for Customer aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.customer import Customer


class CustomerRepository(ABC):
    """Abstract repository for Customer persistence."""

    @abstractmethod
    async def save(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Return the customer with ``customer_id`` or None."""
        pass
