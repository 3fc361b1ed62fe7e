"""Application services."""
from .customer_service import CustomerApplicationService
from .order_service import OrderApplicationService

__all__ = ["CustomerApplicationService", "OrderApplicationService"]
