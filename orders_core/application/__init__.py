"""Application layer - services, interfaces, errors and DTOs."""

from .dtos import (
    CancelOrderRequest,
    CustomerDTO,
    OrderItemDTO,
    OrderListDTO,
    OrderResponseDTO,
    PlaceOrderRequest,
    RegisterCustomerRequest,
    UpdateCustomerRequest,
)
from .errors import (
    ApplicationError,
    CustomerNotFoundError,
    OrderNotFoundError,
    OrderValidationError,
)
from .interfaces import CustomerValidator
from .services import CustomerApplicationService, OrderApplicationService

__all__ = [
    # DTOs
    "CancelOrderRequest",
    "CustomerDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "OrderResponseDTO",
    "PlaceOrderRequest",
    "RegisterCustomerRequest",
    "UpdateCustomerRequest",
    # Errors
    "ApplicationError",
    "CustomerNotFoundError",
    "OrderNotFoundError",
    "OrderValidationError",
    # Services
    "CustomerApplicationService",
    "OrderApplicationService",
    # Interfaces
    "CustomerValidator",
]
