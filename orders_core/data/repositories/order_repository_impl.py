"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orders_core.domain.entities.order import Order
from orders_core.domain.repositories.order_repository import OrderRepository
from orders_core.domain.value_objects import OrderId

from ..errors import RepositoryError
from ..mappers import OrderMapper
from ..models.order_model import OrderModel

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Each call runs in its own session; ``save`` is an upsert committed
    immediately (last write wins).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with SQLAlchemy session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def save(self, order: Order) -> Order:
        """Insert or update the order row.

        Args:
            order: Order domain aggregate

        Returns:
            The same order

        Raises:
            RepositoryError: If the database operation fails
        """
        try:
            async with self._session_factory() as session:
                existing = await session.get(OrderModel, str(order.id))

                if existing:
                    OrderMapper.update_persistence(order, existing)
                else:
                    session.add(OrderMapper.to_persistence(order))

                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to save order {order.id}: {e}")
            raise RepositoryError(f"Failed to save order {order.id}", e) from e

        return order

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(OrderModel).where(OrderModel.id == str(order_id))
                )
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to find order {order_id}", e) from e

        if model is None:
            return None

        return OrderMapper.to_domain(model)

    async def find_all(self, limit: int = 100) -> List[Order]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(OrderModel).order_by(OrderModel.created_at).limit(limit)
                )
                models = result.scalars().all()
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to list orders", e) from e

        return [OrderMapper.to_domain(model) for model in models]

    async def exists(self, order_id: OrderId) -> bool:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(OrderModel.id).where(OrderModel.id == str(order_id))
                )
                return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to check order {order_id}", e) from e
