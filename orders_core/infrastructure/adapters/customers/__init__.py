from .customer_service_adapter import CustomerServiceAdapter

__all__ = ["CustomerServiceAdapter"]
