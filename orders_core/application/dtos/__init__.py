"""Application DTOs."""

from .customer_dto import CustomerDTO, RegisterCustomerRequest, UpdateCustomerRequest
from .order_dto import (
    CancelOrderRequest,
    OrderItemDTO,
    OrderListDTO,
    OrderResponseDTO,
    PlaceOrderRequest,
    to_order_response,
)

__all__ = [
    "CancelOrderRequest",
    "CustomerDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "OrderResponseDTO",
    "PlaceOrderRequest",
    "RegisterCustomerRequest",
    "UpdateCustomerRequest",
    "to_order_response",
]
