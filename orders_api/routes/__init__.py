from . import customers, health, orders

__all__ = ["customers", "health", "orders"]
