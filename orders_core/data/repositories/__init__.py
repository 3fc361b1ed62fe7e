from .customer_repository_impl import SqlAlchemyCustomerRepository
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = ["SqlAlchemyCustomerRepository", "SqlAlchemyOrderRepository"]
