"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orders_core.domain.entities.customer import Customer
from orders_core.domain.repositories.customer_repository import CustomerRepository

from ..errors import RepositoryError
from ..mappers import CustomerMapper
from ..models.customer_model import CustomerModel


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def save(self, customer: Customer) -> None:
        try:
            async with self._session_factory() as session:
                existing = await session.get(CustomerModel, str(customer.id))

                if existing:
                    CustomerMapper.update_persistence(customer, existing)
                else:
                    session.add(CustomerMapper.to_persistence(customer))

                await session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to save customer {customer.id}", e) from e

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        try:
            async with self._session_factory() as session:
                model = await session.get(CustomerModel, customer_id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to find customer {customer_id}", e) from e

        if model is None:
            return None

        return CustomerMapper.to_domain(model)
