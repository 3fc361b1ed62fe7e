"""Data layer - infrastructure persistence and mapping."""

from .errors import RepositoryError
from .mappers import CustomerMapper, OrderItemMapper, OrderMapper
from .models import Base, CustomerModel, OrderModel
from .repositories import SqlAlchemyCustomerRepository, SqlAlchemyOrderRepository

__all__ = [
    "Base",
    "CustomerMapper",
    "CustomerModel",
    "OrderItemMapper",
    "OrderMapper",
    "OrderModel",
    "RepositoryError",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyOrderRepository",
]
