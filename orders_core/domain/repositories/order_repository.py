"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..value_objects import OrderId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Persist order aggregate (insert or overwrite).

        Args:
            order: Order aggregate to persist

        Returns:
            The persisted order
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[Order]:
        """List orders, oldest first.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def exists(self, order_id: OrderId) -> bool:
        """Check if order already exists (duplicate prevention).

        Args:
            order_id: OrderId identifier

        Returns:
            True if order exists, False otherwise
        """
        pass
