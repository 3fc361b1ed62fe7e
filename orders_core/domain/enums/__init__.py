from .order_status import OrderStatus, is_valid_order_status, parse_order_status

__all__ = ["OrderStatus", "is_valid_order_status", "parse_order_status"]
