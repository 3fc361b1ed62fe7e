"""
Order Status Enum.

Closed set of lifecycle states for an order.
"""
from enum import Enum
from typing import Union

from ..errors import InvalidOrderStatusError


class OrderStatus(str, Enum):
    """Order status values (also the persisted strings)."""

    PENDING = "pending"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"


def is_valid_order_status(value: str) -> bool:
    """Check whether ``value`` names one of the known statuses."""
    return value in {status.value for status in OrderStatus}


def parse_order_status(value: Union[str, OrderStatus]) -> OrderStatus:
    """
    Convert a raw status string into an OrderStatus.

    Args:
        value: Raw status (e.g. loaded from storage)

    Returns:
        Matching OrderStatus member

    Raises:
        InvalidOrderStatusError: If the value is not a known status
    """
    if isinstance(value, OrderStatus):
        return value
    if not isinstance(value, str) or not is_valid_order_status(value):
        raise InvalidOrderStatusError(f"Invalid order status: {value}")
    return OrderStatus(value)
