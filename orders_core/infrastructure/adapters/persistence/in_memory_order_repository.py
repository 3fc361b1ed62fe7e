"""
In-Memory Order Repository Implementation.

Dictionary-backed storage for tests, demos and the default "memory"
persistence mode.
"""
from typing import Dict, List, Optional
import logging

from orders_core.domain.entities.order import Order
from orders_core.domain.repositories.order_repository import OrderRepository
from orders_core.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Orders are immutable, so storing the instances themselves is safe.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    async def save(self, order: Order) -> Order:
        """
        Save order to in-memory storage.

        Args:
            order: Order entity to save

        Returns:
            The saved order
        """
        self._storage[str(order.id)] = order
        logger.debug(f"Order saved to memory: {order.id} (status: {order.status.value})")
        return order

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        return self._storage.get(str(order_id))

    async def find_all(self, limit: int = 100) -> List[Order]:
        orders = list(self._storage.values())[:limit]
        logger.debug(f"Found {len(orders)} order(s) in memory (limit: {limit})")
        return orders

    async def exists(self, order_id: OrderId) -> bool:
        return str(order_id) in self._storage

    def clear(self) -> None:
        """Clear all orders (for tests)."""
        self._storage.clear()
