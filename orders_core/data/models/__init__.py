"""Database models."""

from .base import Base
from .customer_model import CustomerModel
from .order_model import OrderModel

__all__ = ["Base", "CustomerModel", "OrderModel"]
