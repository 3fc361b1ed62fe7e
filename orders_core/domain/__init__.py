"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order
from .enums import OrderStatus, parse_order_status
from .errors import (
    CannotCancelShippedOrderError,
    DomainError,
    DomainValidationError,
    InvalidCustomerEmailError,
    InvalidCustomerIdError,
    InvalidCustomerNameError,
    InvalidOrderError,
    InvalidOrderIdError,
    InvalidOrderItemError,
    InvalidOrderStatusError,
    InvalidPricingStrategyError,
)
from .pricing import (
    BulkDiscountPricing,
    PricingStrategy,
    PromotionalPricing,
    StandardPricing,
)
from .repositories import CustomerRepository, OrderRepository
from .value_objects import CustomerEmail, CustomerId, CustomerName, OrderId, OrderItem

__all__ = [
    "BulkDiscountPricing",
    "CannotCancelShippedOrderError",
    "Customer",
    "CustomerEmail",
    "CustomerId",
    "CustomerName",
    "CustomerRepository",
    "DomainError",
    "DomainValidationError",
    "InvalidCustomerEmailError",
    "InvalidCustomerIdError",
    "InvalidCustomerNameError",
    "InvalidOrderError",
    "InvalidOrderIdError",
    "InvalidOrderItemError",
    "InvalidOrderStatusError",
    "InvalidPricingStrategyError",
    "Order",
    "OrderId",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "PricingStrategy",
    "PromotionalPricing",
    "StandardPricing",
    "parse_order_status",
]
